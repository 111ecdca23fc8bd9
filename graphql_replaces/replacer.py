# Copyright 2019-present Kensho Technologies, LLC.
"""Compute the schema additions implied by the @replaces directives in a schema.

A schema author renames a type, field, argument or enum value by giving it its new name and
marking it with the name it replaces:
    type Classroom @replaces(name: "StudentList") {
        id: String!
        teacherKaid: String! @replaces(name: "coachKaid")
    }
The schema files only contain the new names. To keep serving clients that still use the old names,
the schema additions declare the old names next to the new ones, marked as deprecated:
    \"\"\"Deprecated: Replaced by Classroom.\"\"\"
    type StudentList {
        id: String!
        teacherKaid: String!
    }

    extend type Classroom {
        coachKaid: String! @deprecated(reason: "Replaced by teacherKaid.") @goField(...)
    }

    extend type StudentList {
        coachKaid: String! @deprecated(reason: "Replaced by teacherKaid.") @goField(...)
    }
The additions are meant to be placed in a deprecated.graphql file alongside the schema files.

Both the new and the old type get both the new and the old field names. Code that maps between
the two types then never has to care which of the two it is dealing with: all the fields match up.

Processing happens in two passes over the schema. The first pass records every rename and checks
that each @replaces directive is used legally; the second needs the complete set of renamed types
to find the objects implementing renamed interfaces and the unions containing renamed members.
Problems are collected rather than raised, so that every problem in a schema is reported at once,
and no additions are produced for a schema with any problem in it.
"""
from copy import copy
import logging
import re
from typing import Dict, Iterator, List, NamedTuple, Optional, Pattern, Sequence, Union

from graphql.language.ast import (
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    InputValueDefinitionNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    StringValueNode,
    TypeDefinitionNode,
    UnionTypeDefinitionNode,
)

from .ast_manipulation import (
    get_copy_of_node_with_new_name,
    get_directives_without,
    get_type_ast_with_named_type_replaced,
    is_list_type_ast,
    make_description,
    make_directive,
    try_get_argument_by_name,
)
from .exceptions import (
    InvalidReplacesDirectiveError,
    ReplacesDirectiveError,
    ReplacesDirectiveErrorList,
    ReplacesDirectiveInternalError,
)
from .replace_info import ReplaceInfo, get_replace_info
from .schema import (
    DEPRECATED_DIRECTIVE_NAME,
    GO_FIELD_DIRECTIVE_NAME,
    KEY_DIRECTIVE_NAME,
    REPLACES_DIRECTIVE_NAME,
)
from .schema_formatting import print_definition
from .schema_loading import (
    DEFINITION_NODE_TYPES,
    KINDS_WITH_FIELDS,
    DefinitionInfo,
    DefinitionKind,
    get_schema_definitions,
)


logger = logging.getLogger(__name__)

DEPRECATION_REASON_TEMPLATE = "Replaced by {}."
DEPRECATION_DESCRIPTION_PREFIX = "Deprecated: "
# Old fields get accessors named e.g. DeprecatedLocale in generated code.
BINDING_HINT_PREFIX = "Deprecated"

FieldDefinition = Union[FieldDefinitionNode, InputValueDefinitionNode]


class ReplacesDirectiveUpdates(NamedTuple):
    """The result of applying the @replaces directives of a schema."""

    # SDL to place alongside the schema; empty if there are errors or nothing was renamed.
    schema_additions: str
    # Every problem found in the schema, in the order found. Non-empty means failure.
    errors: List[ReplacesDirectiveError]


class DefinitionRename(NamedTuple):
    definition: DefinitionInfo
    old_name: str


class FieldRename(NamedTuple):
    field: FieldDefinition
    replace_info: ReplaceInfo
    # Argument name -> @replaces arguments, for the renamed arguments of the field.
    argument_renames: Dict[str, ReplaceInfo]


class EnumValueRename(NamedTuple):
    enum_value: EnumValueDefinitionNode
    new_name: str
    old_name: str


class Replacer:
    """Record the renames in a single schema, and compute the schema additions they require.

    A Replacer is used exactly once: call process_schema, then get_schema_additions if the
    additions are needed. Calling them out of order or more than once is recorded as an internal
    error.
    """

    # Problems collected while processing the schema and computing the additions.
    errors: List[ReplacesDirectiveError]

    # Every renamed top-level definition: objects, input objects, interfaces, unions, enums and
    # scalars.
    definition_renames: List[DefinitionRename]

    # Maps (new) type name to the renamed fields of that type, in source order.
    field_renames: Dict[str, List[FieldRename]]

    # Maps (new) enum name to the renamed values of that enum, in source order.
    enum_value_renames: Dict[str, List[EnumValueRename]]

    # Maps (new) object name to the old names of the renamed interfaces it implements. The object
    # has to implement the old interface names as well.
    extra_implements: Dict[str, List[str]]

    # Maps (new) union name to the old names of its renamed members. The union has to include the
    # old member names as well.
    extra_union_members: Dict[str, List[str]]

    # Maps new type name to old type name, for every renamed definition.
    replaced_type_names: Dict[str, str]

    # Maps old type name to new type name; the inverse of replaced_type_names.
    claimed_old_type_names: Dict[str, str]

    # Maps (new) type name to the kind of the type.
    definition_kinds: Dict[str, DefinitionKind]

    # Maps (new) type name to the "fields" arguments of the @key directives on the type, exactly
    # as they appear in the schema, e.g. "kaid classroomId" or "course { id }".
    federation_keys: Dict[str, List[str]]

    has_processed_schema: bool
    has_computed_schema_additions: bool

    def __init__(self) -> None:
        """Create a Replacer with empty indices."""
        self.errors = []
        self.definition_renames = []
        self.field_renames = {}
        self.enum_value_renames = {}
        self.extra_implements = {}
        self.extra_union_members = {}
        self.replaced_type_names = {}
        self.claimed_old_type_names = {}
        self.definition_kinds = {}
        self.federation_keys = {}
        self.has_processed_schema = False
        self.has_computed_schema_additions = False

    def process_schema(self, schema_ast: DocumentNode) -> None:
        """Record the uses of @replaces directives in the schema, and any problems with them.

        Args:
            schema_ast: represents a valid schema, e.g. as returned by load_schema_ast. Not
                        modified by this function
        """
        if self.has_processed_schema:
            self.errors.append(
                ReplacesDirectiveInternalError("process_schema called multiple times")
            )
            return
        self.has_processed_schema = True

        definitions = get_schema_definitions(schema_ast)

        for definition in definitions:
            self._process_definition(definition)

            if definition.kind in KINDS_WITH_FIELDS:
                for field in definition.fields:
                    self._process_field(definition.name, definition.kind, field)
            elif definition.kind == DefinitionKind.ENUM:
                for enum_value in definition.values:
                    self._process_enum_value(definition.name, enum_value)

        # The objects implementing renamed interfaces and the unions including renamed members can
        # only be found once every renamed type is known. They get extended with the old names.
        for definition in definitions:
            if definition.kind == DefinitionKind.OBJECT:
                for interface in definition.interfaces:
                    self._process_interface_implementation(definition.name, interface.name.value)
            elif definition.kind == DefinitionKind.UNION:
                for member in definition.types:
                    self._process_union_member(definition.name, member.name.value)

        logger.debug(
            "Processed %d type(s): %d renamed definition(s), renamed fields on %d type(s), "
            "renamed values on %d enum(s), %d error(s).",
            len(definitions),
            len(self.definition_renames),
            len(self.field_renames),
            len(self.enum_value_renames),
            len(self.errors),
        )

    def get_schema_additions(self) -> str:
        """Return the schema additions declaring the old names, or "" if there are errors.

        Note that the input schema contains all the new names already: the additions contain the
        old types, and type extensions adding the old fields, enum values, interfaces and union
        members, needed to stay compatible with the schema as it was before the renames.

        Each group of additions is sorted by name, so the output only depends on the schema.
        """
        if not self.has_processed_schema:
            self.errors.append(
                ReplacesDirectiveInternalError(
                    "must call process_schema before get_schema_additions"
                )
            )
            return ""
        if self.has_computed_schema_additions:
            self.errors.append(
                ReplacesDirectiveInternalError("get_schema_additions called multiple times")
            )
            return ""
        self.has_computed_schema_additions = True

        if self.errors:
            # Never produce partial additions for a schema with problems.
            return ""

        printed_definitions: List[str] = []
        printed_definitions.extend(self._get_definition_additions())
        printed_definitions.extend(self._get_field_additions())
        printed_definitions.extend(self._get_enum_value_additions())
        printed_definitions.extend(self._get_interface_implementation_additions())
        printed_definitions.extend(self._get_union_member_additions())

        logger.debug("Computed %d schema addition(s).", len(printed_definitions))

        if not printed_definitions:
            return ""
        # Tabs, e.g. in descriptions, are expanded like the indentation is.
        return "\n\n".join(printed_definitions).replace("\t", "    ") + "\n"

    def _get_replace_info(
        self, directives: Optional[Sequence[DirectiveNode]]
    ) -> Optional[ReplaceInfo]:
        """Return the @replaces arguments in the directives, recording any problem as an error."""
        try:
            return get_replace_info(directives)
        except ReplacesDirectiveError as e:
            self.errors.append(e)
            return None

    def _process_definition(self, definition: DefinitionInfo) -> None:
        self.definition_kinds[definition.name] = definition.kind
        self.federation_keys[definition.name] = _get_federation_keys(definition.directives)

        replace_info = self._get_replace_info(definition.directives)
        if replace_info is None:
            return

        if replace_info.old_type_name:
            self.errors.append(
                InvalidReplacesDirectiveError(
                    "@replaces directive on definitions can only use `name` argument",
                    {"definition": definition.name},
                )
            )

        other_new_name = self.claimed_old_type_names.get(replace_info.old_name)
        if other_new_name is not None:
            self.errors.append(
                InvalidReplacesDirectiveError(
                    "@replaces directive on definitions must not reuse an old name",
                    {
                        "definition": definition.name,
                        "otherDefinition": other_new_name,
                        "oldName": replace_info.old_name,
                    },
                )
            )
            return

        self.definition_renames.append(DefinitionRename(definition, replace_info.old_name))
        self.replaced_type_names[definition.name] = replace_info.old_name
        self.claimed_old_type_names[replace_info.old_name] = definition.name

    def _process_field(
        self, type_name: str, definition_kind: DefinitionKind, field: FieldDefinition
    ) -> None:
        arguments = _get_field_arguments(field)

        replace_info = self._get_replace_info(field.directives)
        if replace_info is None:
            # Arguments can only be renamed along with their field.
            for argument in arguments:
                if self._get_replace_info(argument.directives) is not None:
                    self.errors.append(
                        InvalidReplacesDirectiveError(
                            "@replaces directive on arguments can only be used on renamed fields",
                            {
                                "type": type_name,
                                "field": field.name.value,
                                "argument": argument.name.value,
                            },
                        )
                    )
            return

        if definition_kind == DefinitionKind.INPUT_OBJECT:
            if isinstance(field.type, NonNullTypeNode):
                self.errors.append(
                    InvalidReplacesDirectiveError(
                        "input fields using the @replaces directive must be nullable",
                        {"type": type_name, "field": field.name.value},
                    )
                )
            if not is_list_type_ast(field.type) and not replace_info.treat_zero_as_unset_present:
                self.errors.append(
                    InvalidReplacesDirectiveError(
                        "@replaces directive on non-list input fields must include "
                        "treatZeroAsUnset:true or treatZeroAsUnset:false",
                        {"type": type_name, "field": field.name.value},
                    )
                )

        argument_renames = {}
        for argument in arguments:
            argument_replace_info = self._get_replace_info(argument.directives)
            if argument_replace_info is not None:
                argument_renames[argument.name.value] = argument_replace_info

        self.field_renames.setdefault(type_name, []).append(
            FieldRename(field, replace_info, argument_renames)
        )

    def _process_enum_value(self, enum_name: str, enum_value: EnumValueDefinitionNode) -> None:
        replace_info = self._get_replace_info(enum_value.directives)
        if replace_info is None:
            return

        if replace_info.old_type_name:
            self.errors.append(
                InvalidReplacesDirectiveError(
                    "@replaces directive on enum values can only use `name` argument",
                    {"enum": enum_name, "enumValue": enum_value.name.value},
                )
            )

        self.enum_value_renames.setdefault(enum_name, []).append(
            EnumValueRename(enum_value, enum_value.name.value, replace_info.old_name)
        )

    def _process_interface_implementation(self, object_name: str, interface_name: str) -> None:
        old_name = self.replaced_type_names.get(interface_name)
        if old_name is not None:
            self.extra_implements.setdefault(object_name, []).append(old_name)

    def _process_union_member(self, union_name: str, member_name: str) -> None:
        old_name = self.replaced_type_names.get(member_name)
        if old_name is not None:
            self.extra_union_members.setdefault(union_name, []).append(old_name)

    def _get_new_and_old_type_names(self, new_name: str) -> List[str]:
        """Return the type name, followed by its old name if the type was renamed."""
        type_names = [new_name]
        old_name = self.replaced_type_names.get(new_name)
        if old_name is not None:
            type_names.append(old_name)
        return type_names

    def _get_definition_additions(self) -> Iterator[str]:
        """Yield a copy of each renamed definition, under its old name.

        The copy keeps the new names of fields, arguments and enum values. The old names are added
        to both the new and the old definition by the extensions emitted later.
        """
        definition_renames = sorted(self.definition_renames, key=lambda rename: rename.old_name)
        for definition_rename in definition_renames:
            definition = definition_rename.definition
            old_definition = _make_old_definition(definition, definition_rename.old_name)
            # Extensions stay extensions, e.g. for types owned by another federated service.
            yield print_definition(old_definition, extend=definition.is_extension)

    def _get_field_additions(self) -> Iterator[str]:
        """Yield the type extensions adding the old field names.

        For example, for a field "teacherKaid" replacing "coachKaid" on a type "Classroom" that
        was not renamed:
            type Classroom { id: ID! teacherKaid: String! }
            extend type Classroom { coachKaid: String! @deprecated(...) }
        If "Classroom" itself replaces "StudentList", the old field is added to both types:
            extend type Classroom   { coachKaid: String! @deprecated(...) }
            extend type StudentList { coachKaid: String! @deprecated(...) }
        """
        for type_name in sorted(self.field_renames):
            field_renames = self.field_renames[type_name]
            definition_kind = self.definition_kinds[type_name]

            old_fields = tuple(
                _make_old_field(definition_kind, field_rename) for field_rename in field_renames
            )
            # Directives on type extensions are additive: the updated keys are present on the
            # type along with the original keys.
            key_directives = tuple(
                make_directive(KEY_DIRECTIVE_NAME, [("fields", key)])
                for key in self._get_updated_federation_keys(type_name, field_renames)
            )

            for extended_type_name in self._get_new_and_old_type_names(type_name):
                extension = DEFINITION_NODE_TYPES[definition_kind](
                    name=NameNode(value=extended_type_name),
                    directives=key_directives,
                    fields=old_fields,
                )
                yield print_definition(extension, extend=True)

    def _get_updated_federation_keys(
        self, type_name: str, field_renames: Sequence[FieldRename]
    ) -> List[str]:
        """Return the keys of the type that mention renamed fields, using the old field names."""
        keys = list(self.federation_keys.get(type_name, ()))
        key_has_updates = [False] * len(keys)

        for field_rename in field_renames:
            new_field_name = field_rename.field.name.value
            for index, key in enumerate(keys):
                # If the renamed field name appears twice in the key, e.g. "id { id }", both get
                # replaced, even though only the one belonging to this type should be. Keys like
                # that are rare enough that this isn't handled.
                if _contains_exact_word(key, new_field_name):
                    keys[index] = _replace_exact_word(
                        key, new_field_name, field_rename.replace_info.old_name
                    )
                    key_has_updates[index] = True

        return [key for key, has_updates in zip(keys, key_has_updates) if has_updates]

    def _get_enum_value_additions(self) -> Iterator[str]:
        """Yield the enum extensions adding the old enum values, to the new and old enums.

        For example:
            enum ContentKind { DOMAIN COURSE }
            extend enum ContentKind { TOPIC @deprecated(reason: "Replaced by COURSE.") }
        """
        for enum_name in sorted(self.enum_value_renames):
            old_values = tuple(
                _make_old_enum_value(enum_value_rename)
                for enum_value_rename in self.enum_value_renames[enum_name]
            )
            for extended_enum_name in self._get_new_and_old_type_names(enum_name):
                extension = EnumTypeDefinitionNode(
                    name=NameNode(value=extended_enum_name), directives=(), values=old_values
                )
                yield print_definition(extension, extend=True)

    def _get_interface_implementation_additions(self) -> Iterator[str]:
        """Yield the object extensions implementing the old names of renamed interfaces."""
        for object_name in sorted(self.extra_implements):
            interfaces = tuple(
                NamedTypeNode(name=NameNode(value=interface_name))
                for interface_name in self.extra_implements[object_name]
            )
            for extended_object_name in self._get_new_and_old_type_names(object_name):
                extension = ObjectTypeDefinitionNode(
                    name=NameNode(value=extended_object_name),
                    interfaces=interfaces,
                    directives=(),
                    fields=(),
                )
                yield print_definition(extension, extend=True)

    def _get_union_member_additions(self) -> Iterator[str]:
        """Yield the union extensions including the old names of renamed members.

        For example:
            union SomeUnion = MemberOne | MemberTwo
            extend union SomeUnion = OldMemberTwo
        """
        for union_name in sorted(self.extra_union_members):
            members = tuple(
                NamedTypeNode(name=NameNode(value=member_name))
                for member_name in self.extra_union_members[union_name]
            )
            for extended_union_name in self._get_new_and_old_type_names(union_name):
                extension = UnionTypeDefinitionNode(
                    name=NameNode(value=extended_union_name), directives=(), types=members
                )
                yield print_definition(extension, extend=True)


def validate_replaces_directives(schema_ast: DocumentNode) -> List[ReplacesDirectiveError]:
    """Return every problem with the uses of @replaces directives in the schema.

    Args:
        schema_ast: represents a valid schema, e.g. as returned by load_schema_ast. Not modified
                    by this function

    Returns:
        list of errors, empty if every @replaces directive is used correctly
    """
    replacer = Replacer()
    replacer.process_schema(schema_ast)
    return list(replacer.errors)


def compute_replaces_directive_updates(schema_ast: DocumentNode) -> ReplacesDirectiveUpdates:
    """Apply the @replaces directives in the schema, returning the additions and any errors.

    Args:
        schema_ast: represents a valid schema, e.g. as returned by load_schema_ast. Not modified
                    by this function

    Returns:
        ReplacesDirectiveUpdates. If its errors are non-empty, the whole schema has to be treated
        as failed, and schema_additions is empty
    """
    replacer = Replacer()
    replacer.process_schema(schema_ast)
    schema_additions = replacer.get_schema_additions()

    if replacer.errors:
        return ReplacesDirectiveUpdates(schema_additions="", errors=list(replacer.errors))
    return ReplacesDirectiveUpdates(schema_additions=schema_additions, errors=[])


def get_replaces_directive_updates(schema_ast: DocumentNode) -> str:
    """Return the schema additions required by the @replaces directives in the schema.

    Args:
        schema_ast: represents a valid schema, e.g. as returned by load_schema_ast. Not modified
                    by this function

    Returns:
        SDL to be placed alongside the schema files, e.g. in a deprecated.graphql file. Empty if
        nothing in the schema is renamed

    Raises:
        ReplacesDirectiveErrorList containing every problem found, if there are any
    """
    updates = compute_replaces_directive_updates(schema_ast)
    if updates.errors:
        raise ReplacesDirectiveErrorList(updates.errors)
    return updates.schema_additions


def _get_field_arguments(field: FieldDefinition) -> Sequence[InputValueDefinitionNode]:
    """Return the arguments of an object or interface field; input fields have none."""
    if isinstance(field, FieldDefinitionNode):
        return field.arguments or ()
    return ()


def _get_federation_keys(directives: Sequence[DirectiveNode]) -> List[str]:
    keys = []
    for directive in directives:
        if directive.name.value == KEY_DIRECTIVE_NAME:
            fields_argument = try_get_argument_by_name(directive, "fields")
            if fields_argument is not None and isinstance(fields_argument.value, StringValueNode):
                keys.append(fields_argument.value.value)
    return keys


def _get_exact_word_pattern(word: str) -> Pattern[str]:
    return re.compile(r"\b" + re.escape(word) + r"\b")


def _contains_exact_word(text: str, word: str) -> bool:
    return _get_exact_word_pattern(word).search(text) is not None


def _replace_exact_word(text: str, word: str, replacement: str) -> str:
    return _get_exact_word_pattern(word).sub(lambda _: replacement, text)


def _get_description_with_sentence(
    description: Optional[StringValueNode], sentence: str
) -> StringValueNode:
    """Return a description ending with the sentence on its own line."""
    if description is None or not description.value:
        return make_description(sentence)
    return make_description(description.value + "\n" + sentence)


def _get_binding_hint_name(old_name: str) -> str:
    """Return the accessor name for generated code, e.g. DeprecatedLocale for "locale"."""
    return BINDING_HINT_PREFIX + old_name[:1].upper() + old_name[1:]


def _copy_without_replaces_directive(
    node: Union[FieldDefinition, EnumValueDefinitionNode]
) -> Union[FieldDefinition, EnumValueDefinitionNode]:
    node_copy = copy(node)
    node_copy.directives = get_directives_without(node.directives, REPLACES_DIRECTIVE_NAME)
    if isinstance(node_copy, FieldDefinitionNode):
        node_copy.arguments = tuple(
            _copy_without_replaces_directive(argument) for argument in node.arguments or ()
        )
    return node_copy


def _make_old_definition(definition: DefinitionInfo, old_name: str) -> TypeDefinitionNode:
    """Return a copy of the definition under its old name, without @replaces directives."""
    description = None
    if not definition.is_extension:
        description = _get_description_with_sentence(
            definition.description,
            DEPRECATION_DESCRIPTION_PREFIX + DEPRECATION_REASON_TEMPLATE.format(definition.name),
        )

    definition_fields = {
        "name": NameNode(value=old_name),
        "description": description,
        "directives": get_directives_without(definition.directives, REPLACES_DIRECTIVE_NAME),
    }
    if definition.kind in KINDS_WITH_FIELDS:
        definition_fields["fields"] = tuple(
            _copy_without_replaces_directive(field) for field in definition.fields
        )
    if definition.kind in (DefinitionKind.OBJECT, DefinitionKind.INTERFACE):
        definition_fields["interfaces"] = definition.interfaces
    if definition.kind == DefinitionKind.ENUM:
        definition_fields["values"] = tuple(
            _copy_without_replaces_directive(enum_value) for enum_value in definition.values
        )
    if definition.kind == DefinitionKind.UNION:
        definition_fields["types"] = definition.types

    return DEFINITION_NODE_TYPES[definition.kind](**definition_fields)


def _make_old_argument(
    argument: InputValueDefinitionNode, replace_info: Optional[ReplaceInfo]
) -> InputValueDefinitionNode:
    if replace_info is None:
        return copy(argument)

    old_argument = get_copy_of_node_with_new_name(argument, replace_info.old_name)
    old_argument.directives = get_directives_without(argument.directives, REPLACES_DIRECTIVE_NAME)
    if replace_info.old_type_name:
        old_argument.type = get_type_ast_with_named_type_replaced(
            argument.type, replace_info.old_type_name
        )
    return old_argument


def _make_old_field(definition_kind: DefinitionKind, field_rename: FieldRename) -> FieldDefinition:
    """Return the deprecated field with the old name, type and argument names."""
    field = field_rename.field
    replace_info = field_rename.replace_info

    old_field = get_copy_of_node_with_new_name(field, replace_info.old_name)
    if replace_info.old_type_name:
        old_field.type = get_type_ast_with_named_type_replaced(
            field.type, replace_info.old_type_name
        )

    if isinstance(old_field, FieldDefinitionNode):
        old_field.arguments = tuple(
            _make_old_argument(argument, field_rename.argument_renames.get(argument.name.value))
            for argument in _get_field_arguments(field)
        )

    directives = get_directives_without(field.directives, REPLACES_DIRECTIVE_NAME)
    deprecation_reason = DEPRECATION_REASON_TEMPLATE.format(field.name.value)
    if definition_kind == DefinitionKind.INPUT_OBJECT:
        # The @deprecated directive isn't valid on input fields.
        old_field.description = _get_description_with_sentence(
            field.description, DEPRECATION_DESCRIPTION_PREFIX + deprecation_reason
        )
    else:
        directives += (make_directive(DEPRECATED_DIRECTIVE_NAME, [("reason", deprecation_reason)]),)
    directives += (
        make_directive(
            GO_FIELD_DIRECTIVE_NAME, [("name", _get_binding_hint_name(replace_info.old_name))]
        ),
    )
    old_field.directives = directives
    return old_field


def _make_old_enum_value(enum_value_rename: EnumValueRename) -> EnumValueDefinitionNode:
    old_enum_value = get_copy_of_node_with_new_name(
        enum_value_rename.enum_value, enum_value_rename.old_name
    )
    old_enum_value.directives = get_directives_without(
        enum_value_rename.enum_value.directives, REPLACES_DIRECTIVE_NAME
    ) + (
        make_directive(
            DEPRECATED_DIRECTIVE_NAME,
            [("reason", DEPRECATION_REASON_TEMPLATE.format(enum_value_rename.new_name))],
        ),
    )
    return old_enum_value
