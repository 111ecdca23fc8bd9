# Copyright 2019-present Kensho Technologies, LLC.
"""The table of renamed types and fields, for tools generating code that maps old names to new."""
from typing import Dict, List, NamedTuple

from graphql.language.ast import DocumentNode

from .exceptions import ReplacesDirectiveErrorList
from .replacer import Replacer
from .schema_loading import DefinitionKind


# Only objects and input objects have values that code has to convert between old and new names.
RENAME_TABLE_KINDS = frozenset({DefinitionKind.OBJECT, DefinitionKind.INPUT_OBJECT})


class RenamedTypeInfo(NamedTuple):
    kind: DefinitionKind
    new_name: str
    old_name: str


class RenamedFieldInfo(NamedTuple):
    new_name: str
    old_name: str
    # Passed through from the @replaces directive, for code accepting values of the old field.
    was_required_before_rename: bool
    treat_zero_as_unset: bool


class RenamedFieldGroup(NamedTuple):
    type_kind: DefinitionKind
    # In schema order.
    fields: List[RenamedFieldInfo]


class SchemaRenameInfo(NamedTuple):
    # Both keyed by the new type name, with keys in sorted order.
    renamed_types: Dict[str, RenamedTypeInfo]
    renamed_fields: Dict[str, RenamedFieldGroup]

    def has_object_renames(self) -> bool:
        """Return True iff at least one object type is renamed."""
        return any(
            type_info.kind == DefinitionKind.OBJECT for type_info in self.renamed_types.values()
        )

    def has_input_object_field_renames(self) -> bool:
        """Return True iff at least one field of an input object is renamed."""
        return any(
            field_group.type_kind == DefinitionKind.INPUT_OBJECT
            for field_group in self.renamed_fields.values()
        )


def get_schema_rename_info(schema_ast: DocumentNode) -> SchemaRenameInfo:
    """Return the renamed objects and input objects of the schema, and their renamed fields.

    Args:
        schema_ast: represents a valid schema, e.g. as returned by load_schema_ast. Not modified
                    by this function

    Returns:
        SchemaRenameInfo describing every rename of an object, an input object, or one of their
        fields. Renamed interfaces, unions, enums, scalars and arguments are not included

    Raises:
        ReplacesDirectiveErrorList containing every problem found, if there are any
    """
    replacer = Replacer()
    replacer.process_schema(schema_ast)
    if replacer.errors:
        raise ReplacesDirectiveErrorList(replacer.errors)

    renamed_types = {}
    for definition_rename in sorted(
        replacer.definition_renames, key=lambda rename: rename.definition.name
    ):
        definition = definition_rename.definition
        if definition.kind in RENAME_TABLE_KINDS:
            renamed_types[definition.name] = RenamedTypeInfo(
                kind=definition.kind, new_name=definition.name, old_name=definition_rename.old_name
            )

    renamed_fields = {}
    for type_name in sorted(replacer.field_renames):
        type_kind = replacer.definition_kinds[type_name]
        if type_kind not in RENAME_TABLE_KINDS:
            continue
        renamed_fields[type_name] = RenamedFieldGroup(
            type_kind=type_kind,
            fields=[
                RenamedFieldInfo(
                    new_name=field_rename.field.name.value,
                    old_name=field_rename.replace_info.old_name,
                    was_required_before_rename=field_rename.replace_info.was_required_before_rename,
                    treat_zero_as_unset=field_rename.replace_info.treat_zero_as_unset,
                )
                for field_rename in replacer.field_renames[type_name]
            ],
        )

    return SchemaRenameInfo(renamed_types=renamed_types, renamed_fields=renamed_fields)
