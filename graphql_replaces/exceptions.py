# Copyright 2017-present Kensho Technologies, LLC.
from typing import List, Mapping, Optional, Sequence


class GraphQLError(Exception):
    """Generic error when processing GraphQL."""


class GraphQLParsingError(GraphQLError):
    """Exception raised when the provided GraphQL string could not be parsed."""


class GraphQLValidationError(GraphQLError):
    """Exception raised when the provided GraphQL schema does not pass SDL validation."""


class ReplacesDirectiveError(GraphQLError):
    """Parent of errors describing a problem with a @replaces directive.

    Each error carries a human-readable message and a mapping of details (type, field, argument,
    and so on) identifying the schema element the message is about.
    """

    message: str
    details: Mapping[str, str]

    def __init__(self, message: str, details: Optional[Mapping[str, str]] = None) -> None:
        """Record the message and the schema element details."""
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        """Render the message followed by the details, if any."""
        if not self.details:
            return self.message
        rendered_details = ", ".join(f"{key}: {value}" for key, value in self.details.items())
        return f"{self.message} ({rendered_details})"


class InvalidReplacesDirectiveError(ReplacesDirectiveError):
    """Raised if a @replaces directive is used in a way that is not allowed.

    This is a problem with the schema itself, for example:
    - a `type` argument on a directive attached to a definition or an enum value;
    - a renamed argument on a field that is not itself renamed;
    - a renamed input field that is non-nullable, or that doesn't state treatZeroAsUnset;
    - two definitions claiming the same old name.
    """


class ReplacesDirectiveInternalError(ReplacesDirectiveError):
    """Raised if the @replaces tooling was wired up incorrectly.

    This is never a problem with the schema author's input: either the schema validator let
    through a directive the grammar should have rejected, or the Replacer was driven out of order.
    """


class ReplacesDirectiveErrorList(ReplacesDirectiveError):
    """Raised when one or more @replaces directive errors were found in a schema.

    All the problems found in a schema are reported together, so that they can all be fixed at once.
    """

    errors: List[ReplacesDirectiveError]

    def __init__(self, errors: Sequence[ReplacesDirectiveError]) -> None:
        """Record all the errors."""
        if not errors:
            raise ValueError(
                "Cannot raise ReplacesDirectiveErrorList without at least one error, but the "
                "error list was empty."
            )
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))

    def __str__(self) -> str:
        """Join all the error messages, one per line."""
        return self.message
