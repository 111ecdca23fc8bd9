# Copyright 2017-present Kensho Technologies, LLC.
"""Definitions of the directives read and written by the @replaces tooling."""
from collections import OrderedDict

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLDirective,
    GraphQLNonNull,
    GraphQLString,
)
from graphql.utilities.print_schema import print_directive


REPLACES_DIRECTIVE_NAME = "replaces"
KEY_DIRECTIVE_NAME = "key"
GO_FIELD_DIRECTIVE_NAME = "goField"
DEPRECATED_DIRECTIVE_NAME = "deprecated"


# Constraints:
# - 'type' may only be used on field and argument definitions;
# - on a field or argument, 'type' replaces only the innermost named type, the list and non-null
#   wrappers of the new type are kept;
# - arguments may only be renamed on fields that are renamed too;
# - renamed input fields must be nullable, and non-list renamed input fields must say whether a
#   zero value sent by an old client means "unset" via 'treatZeroAsUnset'.
ReplacesDirective = GraphQLDirective(
    name=REPLACES_DIRECTIVE_NAME,
    args=OrderedDict(
        [
            (
                "name",
                GraphQLArgument(
                    type_=GraphQLNonNull(GraphQLString),
                    description="The old name of the type, field, argument or enum value.",
                ),
            ),
            (
                "type",
                GraphQLArgument(
                    type_=GraphQLString,
                    description="The old type of the field or argument, if it changed too.",
                ),
            ),
            (
                "wasRequiredBeforeRename",
                GraphQLArgument(
                    type_=GraphQLBoolean,
                    description="Whether the old input field was non-nullable before the rename.",
                ),
            ),
            (
                "treatZeroAsUnset",
                GraphQLArgument(
                    type_=GraphQLBoolean,
                    description=(
                        "Whether a zero value sent for the old input field means it was not set."
                    ),
                ),
            ),
        ]
    ),
    locations=[
        DirectiveLocation.SCALAR,
        DirectiveLocation.OBJECT,
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.ARGUMENT_DEFINITION,
        DirectiveLocation.INTERFACE,
        DirectiveLocation.UNION,
        DirectiveLocation.ENUM,
        DirectiveLocation.ENUM_VALUE,
        DirectiveLocation.INPUT_OBJECT,
        DirectiveLocation.INPUT_FIELD_DEFINITION,
    ],
)


# The federation entity key. Only read: the 'fields' string is rewritten when a field it mentions
# is renamed, and the rewritten key is added to the type extension for the old field.
KeyDirective = GraphQLDirective(
    name=KEY_DIRECTIVE_NAME,
    args=OrderedDict(
        [
            (
                "fields",
                GraphQLArgument(
                    type_=GraphQLNonNull(GraphQLString),
                    description="Space-separated selection of the fields identifying the entity.",
                ),
            ),
        ]
    ),
    is_repeatable=True,
    locations=[
        DirectiveLocation.OBJECT,
        DirectiveLocation.INTERFACE,
    ],
)


# Only written: every old field carries a binding hint so code generators name its accessor
# Deprecated<OldName> rather than colliding with the new field's accessor.
GoFieldDirective = GraphQLDirective(
    name=GO_FIELD_DIRECTIVE_NAME,
    args=OrderedDict(
        [
            ("forceResolver", GraphQLArgument(type_=GraphQLBoolean)),
            ("name", GraphQLArgument(type_=GraphQLString)),
            ("omittable", GraphQLArgument(type_=GraphQLBoolean)),
        ]
    ),
    locations=[
        DirectiveLocation.INPUT_FIELD_DEFINITION,
        DirectiveLocation.FIELD_DEFINITION,
    ],
)


DIRECTIVES = (ReplacesDirective, KeyDirective, GoFieldDirective)

REPLACES_DIRECTIVE_DEFINITION = print_directive(ReplacesDirective)
KEY_DIRECTIVE_DEFINITION = print_directive(KeyDirective)
GO_FIELD_DIRECTIVE_DEFINITION = print_directive(GoFieldDirective)

# SDL declaring every directive above, to be placed alongside the schema files that use them.
DIRECTIVES_DEFINITION = "\n\n".join(print_directive(directive) for directive in DIRECTIVES) + "\n"
