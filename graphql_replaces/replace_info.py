# Copyright 2019-present Kensho Technologies, LLC.
from typing import NamedTuple, Optional, Sequence

from graphql.language.ast import ArgumentNode, BooleanValueNode, DirectiveNode, StringValueNode

from .ast_manipulation import try_get_argument_by_name, try_get_directive_by_name
from .exceptions import InvalidReplacesDirectiveError, ReplacesDirectiveInternalError
from .schema import REPLACES_DIRECTIVE_NAME


class ReplaceInfo(NamedTuple):
    """The arguments of a single @replaces directive.

    Consider the directive in:
        type AwesomelyNamedType @replaces(name: "TerriblyNamedType") {
            awesomelyNamedField: AnotherGreatType @replaces(
                name: "terriblyNamedField", type: "AnotherNotSoGreatType")
        }
    old_name refers to the name being replaced ("TerriblyNamedType", "terriblyNamedField") and
    old_type_name to the type being replaced ("AnotherNotSoGreatType"). An empty type argument
    counts as no type argument, so old_type_name is None in both cases.
    """

    old_name: str
    old_type_name: Optional[str]
    was_required_before_rename: bool
    treat_zero_as_unset: bool
    # treatZeroAsUnset: false and an omitted treatZeroAsUnset are both legal, but mean different
    # things: omitting it is only allowed on list input fields.
    treat_zero_as_unset_present: bool


def get_replace_info(directives: Optional[Sequence[DirectiveNode]]) -> Optional[ReplaceInfo]:
    """Return the arguments of the @replaces directive in the list, or None if there is none.

    Args:
        directives: directives attached to a single type, field, argument or enum value

    Returns:
        ReplaceInfo describing the directive, or None if no @replaces directive is present

    Raises:
        - ReplacesDirectiveInternalError if the directive has no "name" argument. The schema
          validator requires it, so this means an unvalidated schema was passed in
        - InvalidReplacesDirectiveError if an argument value has the wrong kind, e.g. a number
          where a string is expected
    """
    directive = try_get_directive_by_name(directives, REPLACES_DIRECTIVE_NAME)
    if directive is None:
        return None

    name_argument = try_get_argument_by_name(directive, "name")
    if name_argument is None:
        raise ReplacesDirectiveInternalError("name required on @replaces directive")

    old_type_name = None
    type_argument = try_get_argument_by_name(directive, "type")
    if type_argument is not None:
        old_type_name = _get_string_value(type_argument) or None

    was_required_before_rename = False
    was_required_argument = try_get_argument_by_name(directive, "wasRequiredBeforeRename")
    if was_required_argument is not None:
        was_required_before_rename = _get_boolean_value(was_required_argument)

    treat_zero_as_unset = False
    treat_zero_as_unset_argument = try_get_argument_by_name(directive, "treatZeroAsUnset")
    if treat_zero_as_unset_argument is not None:
        treat_zero_as_unset = _get_boolean_value(treat_zero_as_unset_argument)

    return ReplaceInfo(
        old_name=_get_string_value(name_argument),
        old_type_name=old_type_name,
        was_required_before_rename=was_required_before_rename,
        treat_zero_as_unset=treat_zero_as_unset,
        treat_zero_as_unset_present=treat_zero_as_unset_argument is not None,
    )


def _get_string_value(argument: ArgumentNode) -> str:
    if not isinstance(argument.value, StringValueNode):
        raise InvalidReplacesDirectiveError(
            "@replaces directive argument must be a string",
            {"argument": argument.name.value},
        )
    return argument.value.value


def _get_boolean_value(argument: ArgumentNode) -> bool:
    if not isinstance(argument.value, BooleanValueNode):
        raise InvalidReplacesDirectiveError(
            "@replaces directive argument must be a boolean",
            {"argument": argument.name.value},
        )
    return argument.value.value
