# Copyright 2017-present Kensho Technologies, LLC.
from copy import copy
import re
from typing import Any, List, Optional

from graphql.language.ast import Node, TypeDefinitionNode, TypeExtensionNode
from graphql.language.printer import print_ast
from graphql.language.visitor import IDLE, Visitor, visit

from .ast_manipulation import make_description
from .schema_loading import EXTENSION_NODE_TYPES, get_definition_kind


# Triple quotes opening or closing a block string. Escaped triple quotes inside a block string
# are printed as \""".
_BLOCK_STRING_QUOTES_PATTERN = re.compile(r'(?<!\\)"""')

# A block string value that can be printed on the same line as its quotes.
_SINGLE_LINE_BLOCK_STRING_VALUE_PATTERN = re.compile(r'[^\s"\\](?:.*[^\s"\\])?')


class DescriptionBlockStringVisitor(Visitor):
    """Visitor that makes every description in an AST a block string."""

    def enter(
        self,
        node: Node,
        key: Any,
        parent: Any,
        path: List[Any],
        ancestors: List[Any],
    ) -> Optional[Node]:
        """Upon entering a node, replace it by a copy if its description is a plain string."""
        description = getattr(node, "description", None)
        if description is None or description.block:
            return IDLE

        new_node = copy(node)
        new_node.description = make_description(description.value)
        return new_node


def print_definition(
    definition: TypeDefinitionNode, extend: bool = False, use_four_spaces: bool = True
) -> str:
    """Print a type definition as SDL, optionally as an extension of the type.

    Descriptions are always printed as block strings, and a description whose value is a single
    line is printed on a single line.

    Args:
        definition: AST of the type definition to print
        extend: if True, print the definition with the "extend" keyword. Extensions may not have
                descriptions, so any description on the definition is dropped
        use_four_spaces: if True, indent with four spaces instead of the two GraphQL normally uses

    Returns:
        SDL text of the definition, without a trailing newline
    """
    node = get_extension_node(definition) if extend else definition
    node = visit(node, DescriptionBlockStringVisitor())
    output = join_single_line_block_strings(print_ast(node))

    # Four spaces match the indentation of the schema files the output is placed next to.
    if use_four_spaces:
        return fix_indentation_depth(output)
    return output


def get_extension_node(definition: TypeDefinitionNode) -> TypeExtensionNode:
    """Return the extension node declaring the same members as the definition node."""
    extension_type = EXTENSION_NODE_TYPES[get_definition_kind(definition)]
    return extension_type(
        **{key: getattr(definition, key) for key in extension_type.keys if key != "loc"}
    )


def fix_indentation_depth(text: str) -> str:
    """Make indentation use 4 spaces, rather than the 2 spaces GraphQL normally uses.

    The printer indents every line of a block string by the indentation of its opening quotes.
    Only that indentation is rescaled, so the value of the block string is unchanged.
    """
    lines = text.split("\n")
    final_lines = []

    # Indentation of the opening quotes of the block string the current line is part of.
    block_string_indentation: Optional[int] = None

    for line in lines:
        if block_string_indentation is None:
            indentation = len(line) - len(line.lstrip(" "))
        else:
            indentation = min(block_string_indentation, len(line) - len(line.lstrip(" ")))

        indentation_levels, leftover_spaces = divmod(indentation, 2)
        final_lines.append(
            ("    " * indentation_levels) + (" " * leftover_spaces) + line[indentation:]
        )

        if len(_BLOCK_STRING_QUOTES_PATTERN.findall(line)) % 2 == 1:
            if block_string_indentation is None:
                block_string_indentation = indentation
            else:
                block_string_indentation = None

    return "\n".join(final_lines)


def join_single_line_block_strings(text: str) -> str:
    """Print each block string with a single line value on the line of its quotes.

    The printer puts the value of a block string on its own line, between the quotes, when the
    value is too long to its taste. A description always fits on one line when its value does.
    """
    lines = text.split("\n")
    final_lines = []
    in_block_string = False

    line_index = 0
    while line_index < len(lines):
        line = lines[line_index]
        indentation = line[: len(line) - len(line.lstrip(" "))]

        if not in_block_string and line == indentation + '"""' and line_index + 2 < len(lines):
            value_line = lines[line_index + 1]
            value = value_line[len(indentation) :]
            if (
                lines[line_index + 2] == line
                and value_line.startswith(indentation)
                and _SINGLE_LINE_BLOCK_STRING_VALUE_PATTERN.fullmatch(value)
                and not _BLOCK_STRING_QUOTES_PATTERN.search(value)
            ):
                final_lines.append(indentation + '"""' + value + '"""')
                line_index += 3
                continue

        if len(_BLOCK_STRING_QUOTES_PATTERN.findall(line)) % 2 == 1:
            in_block_string = not in_block_string
        final_lines.append(line)
        line_index += 1

    return "\n".join(final_lines)
