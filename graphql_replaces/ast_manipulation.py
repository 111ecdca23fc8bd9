# Copyright 2019-present Kensho Technologies, LLC.
from copy import copy
from typing import Iterable, Optional, Sequence, Tuple, TypeVar

from graphql.error import GraphQLSyntaxError
from graphql.language.ast import (
    ArgumentNode,
    DirectiveNode,
    DocumentNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    Node,
    NonNullTypeNode,
    StringValueNode,
    TypeNode,
)
from graphql.language.parser import parse

from .exceptions import GraphQLParsingError


NodeT = TypeVar("NodeT", bound=Node)


def safe_parse_graphql(graphql_string: str) -> DocumentNode:
    """Return an AST representation of the given GraphQL input, reraising GraphQL library errors."""
    try:
        ast = parse(graphql_string)
    except GraphQLSyntaxError as e:
        raise GraphQLParsingError(e) from e

    return ast


def get_ast_with_non_null_stripped(ast: TypeNode) -> TypeNode:
    """Strip a NonNullType layer around the AST if there is one, return the underlying AST."""
    if isinstance(ast, NonNullTypeNode):
        stripped_ast = ast.type
        if isinstance(stripped_ast, NonNullTypeNode):
            raise AssertionError(
                "NonNullType is unexpectedly found to wrap around another NonNullType in AST "
                "{}, which is not allowed.".format(ast)
            )
        return stripped_ast
    else:
        return ast


def is_list_type_ast(ast: TypeNode) -> bool:
    """Return True iff the type is a list type, e.g. [String] or [User!]! but not String!."""
    return isinstance(get_ast_with_non_null_stripped(ast), ListTypeNode)


def get_type_ast_with_named_type_replaced(ast: TypeNode, new_type_name: str) -> TypeNode:
    """Return a type AST with the same shape as the input, but a different innermost named type.

    "Same shape" means that the list nesting and the non-null wrappers at every level are
    preserved; for example, replacing the named type of [T!]! with U produces [U!]!.

    Args:
        ast: type AST to copy. Not modified by this function
        new_type_name: name of the named type to place at the innermost level

    Returns:
        new type AST
    """
    if isinstance(ast, NonNullTypeNode):
        return NonNullTypeNode(type=get_type_ast_with_named_type_replaced(ast.type, new_type_name))
    elif isinstance(ast, ListTypeNode):
        return ListTypeNode(type=get_type_ast_with_named_type_replaced(ast.type, new_type_name))
    elif isinstance(ast, NamedTypeNode):
        return NamedTypeNode(name=NameNode(value=new_type_name))
    else:
        raise AssertionError("Unexpected type AST {} of type {}.".format(ast, type(ast)))


def get_copy_of_node_with_new_name(node: NodeT, new_name: str) -> NodeT:
    """Return a node with new_name as its name and otherwise identical to the input node."""
    if not hasattr(node, "name"):
        raise AssertionError("Input node {} of type {} has no name.".format(node, type(node)))
    node_with_new_name = copy(node)  # shallow copy is enough
    node_with_new_name.name = NameNode(value=new_name)  # type: ignore
    return node_with_new_name


def try_get_directive_by_name(
    directives: Optional[Iterable[DirectiveNode]], directive_name: str
) -> Optional[DirectiveNode]:
    """Return the first directive with the given name, or None if there is no such directive."""
    for directive in directives or ():
        if directive.name.value == directive_name:
            return directive
    return None


def try_get_argument_by_name(
    directive: DirectiveNode, argument_name: str
) -> Optional[ArgumentNode]:
    """Return the directive argument with the given name, or None if there is no such argument."""
    for argument in directive.arguments or ():
        if argument.name.value == argument_name:
            return argument
    return None


def get_directives_without(
    directives: Optional[Sequence[DirectiveNode]], directive_name: str
) -> Tuple[DirectiveNode, ...]:
    """Return a copy of the directive list with every directive of the given name removed."""
    return tuple(
        directive for directive in directives or () if directive.name.value != directive_name
    )


def make_directive(directive_name: str, arguments: Sequence[Tuple[str, str]]) -> DirectiveNode:
    """Return a directive AST with the given string argument values, in order."""
    argument_nodes = tuple(
        ArgumentNode(name=NameNode(value=argument_name), value=StringValueNode(value=value))
        for argument_name, value in arguments
    )
    return DirectiveNode(name=NameNode(value=directive_name), arguments=argument_nodes)


def make_description(text: str) -> StringValueNode:
    """Return a block string AST suitable as the description of a definition, field or value."""
    return StringValueNode(value=text, block=True)
