# Copyright 2019-present Kensho Technologies, LLC.
"""Load schema text and present a merged, read-only view of its named types.

A type may be declared once with a definition and any number of times with "extend", or, in
federated schemas, only with "extend". The merged view combines every declaration of a type, in
source order, into a single DefinitionInfo, and records whether the type was only ever declared as
an extension.
"""
from dataclasses import dataclass
from enum import Enum, unique
from itertools import chain
from typing import Dict, List, Optional, Sequence, Tuple, Type, Union

from funcy import lsplit
from graphql.language.ast import (
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    NamedTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    StringValueNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)
from graphql.validation import PossibleTypeExtensionsRule
from graphql.validation.specified_rules import specified_sdl_rules
from graphql.validation.validate import validate_sdl

from .ast_manipulation import safe_parse_graphql
from .exceptions import GraphQLValidationError


@unique
class DefinitionKind(Enum):
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"


TypeSystemNode = Union[TypeDefinitionNode, TypeExtensionNode]

DEFINITION_NODE_TYPES: Dict[DefinitionKind, Type[TypeDefinitionNode]] = {
    DefinitionKind.SCALAR: ScalarTypeDefinitionNode,
    DefinitionKind.OBJECT: ObjectTypeDefinitionNode,
    DefinitionKind.INTERFACE: InterfaceTypeDefinitionNode,
    DefinitionKind.UNION: UnionTypeDefinitionNode,
    DefinitionKind.ENUM: EnumTypeDefinitionNode,
    DefinitionKind.INPUT_OBJECT: InputObjectTypeDefinitionNode,
}

EXTENSION_NODE_TYPES: Dict[DefinitionKind, Type[TypeExtensionNode]] = {
    DefinitionKind.SCALAR: ScalarTypeExtensionNode,
    DefinitionKind.OBJECT: ObjectTypeExtensionNode,
    DefinitionKind.INTERFACE: InterfaceTypeExtensionNode,
    DefinitionKind.UNION: UnionTypeExtensionNode,
    DefinitionKind.ENUM: EnumTypeExtensionNode,
    DefinitionKind.INPUT_OBJECT: InputObjectTypeExtensionNode,
}

_NODE_TYPE_TO_KIND: Dict[Type[TypeSystemNode], DefinitionKind] = dict(
    chain(
        ((node_type, kind) for kind, node_type in DEFINITION_NODE_TYPES.items()),
        ((node_type, kind) for kind, node_type in EXTENSION_NODE_TYPES.items()),
    )
)

# Kinds whose members are FieldDefinitionNode or InputValueDefinitionNode objects.
KINDS_WITH_FIELDS = frozenset(
    {DefinitionKind.OBJECT, DefinitionKind.INTERFACE, DefinitionKind.INPUT_OBJECT}
)

# The standard SDL rules, except the one requiring each extended type to be defined: federated
# schemas extend types that are defined by other services.
_SDL_VALIDATION_RULES = tuple(
    rule for rule in specified_sdl_rules if rule is not PossibleTypeExtensionsRule
)


def load_schema_ast(schema_text: str) -> DocumentNode:
    """Parse and validate schema text, returning its AST.

    Args:
        schema_text: GraphQL SDL, including the declarations of every directive it uses

    Returns:
        DocumentNode representing the schema

    Raises:
        - GraphQLParsingError if the text is not syntactically valid GraphQL
        - GraphQLValidationError if the SDL does not pass validation, e.g. it uses an undeclared
          directive or omits a required directive argument
    """
    schema_ast = safe_parse_graphql(schema_text)
    errors = validate_sdl(schema_ast, rules=_SDL_VALIDATION_RULES)
    if errors:
        raise GraphQLValidationError(
            "Schema does not validate: {}".format([error.message for error in errors])
        )
    return schema_ast


@dataclass(frozen=True)
class DefinitionInfo:
    """All the declarations of a single named type, merged in source order."""

    name: str
    kind: DefinitionKind
    # The definition node comes first if there is one; extension nodes follow in source order.
    nodes: Tuple[TypeSystemNode, ...]
    # True iff every declaration of the type uses the "extend" keyword.
    is_extension: bool

    @property
    def description(self) -> Optional[StringValueNode]:
        """Return the description of the type, if it has one. Extensions carry no description."""
        if self.is_extension:
            return None
        return self.nodes[0].description  # type: ignore

    @property
    def directives(self) -> Tuple[DirectiveNode, ...]:
        """Return the directives of every declaration of the type."""
        return self._merged("directives")

    @property
    def fields(self) -> Tuple[Union[FieldDefinitionNode, InputValueDefinitionNode], ...]:
        """Return the fields of an object, interface or input object."""
        return self._merged("fields")

    @property
    def values(self) -> Tuple[EnumValueDefinitionNode, ...]:
        """Return the values of an enum."""
        return self._merged("values")

    @property
    def interfaces(self) -> Tuple[NamedTypeNode, ...]:
        """Return the interfaces implemented by an object or interface."""
        return self._merged("interfaces")

    @property
    def types(self) -> Tuple[NamedTypeNode, ...]:
        """Return the members of a union."""
        return self._merged("types")

    def _merged(self, attribute: str) -> tuple:
        return tuple(
            chain.from_iterable(getattr(node, attribute, None) or () for node in self.nodes)
        )


def get_definition_kind(node: TypeSystemNode) -> DefinitionKind:
    """Return the kind of type a definition or extension node declares."""
    kind = _NODE_TYPE_TO_KIND.get(type(node))
    if kind is None:
        raise AssertionError(
            "Node {} of type {} is not a type declaration.".format(node, type(node))
        )
    return kind


def get_schema_definitions(schema_ast: DocumentNode) -> List[DefinitionInfo]:
    """Return the merged declarations of every named type in the schema, in source order.

    Types are ordered by their first declaration. Directive definitions and schema definitions are
    not named types and are skipped. The input AST is not modified.

    Args:
        schema_ast: represents a schema, e.g. as returned by load_schema_ast

    Returns:
        list of DefinitionInfo, one per named type declared in the schema
    """
    nodes_by_name: Dict[str, List[TypeSystemNode]] = {}
    for definition in schema_ast.definitions:
        if isinstance(definition, (TypeDefinitionNode, TypeExtensionNode)):
            nodes_by_name.setdefault(definition.name.value, []).append(definition)

    return [_make_definition_info(name, nodes) for name, nodes in nodes_by_name.items()]


def _make_definition_info(name: str, nodes: Sequence[TypeSystemNode]) -> DefinitionInfo:
    definition_nodes, extension_nodes = lsplit(
        lambda node: isinstance(node, TypeDefinitionNode), nodes
    )
    ordered_nodes = tuple(definition_nodes + extension_nodes)
    return DefinitionInfo(
        name=name,
        kind=get_definition_kind(ordered_nodes[0]),
        nodes=ordered_nodes,
        is_extension=not definition_nodes,
    )
