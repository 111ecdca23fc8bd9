# Copyright 2017-present Kensho Technologies, LLC.
"""Commonly-used functions and data types from this package."""
from .exceptions import (  # noqa
    GraphQLError,
    GraphQLParsingError,
    GraphQLValidationError,
    InvalidReplacesDirectiveError,
    ReplacesDirectiveError,
    ReplacesDirectiveErrorList,
    ReplacesDirectiveInternalError,
)
from .rename_info import (  # noqa
    RenamedFieldGroup,
    RenamedFieldInfo,
    RenamedTypeInfo,
    SchemaRenameInfo,
    get_schema_rename_info,
)
from .replace_info import ReplaceInfo, get_replace_info  # noqa
from .replacer import (  # noqa
    Replacer,
    ReplacesDirectiveUpdates,
    compute_replaces_directive_updates,
    get_replaces_directive_updates,
    validate_replaces_directives,
)
from .schema import (  # noqa
    DIRECTIVES,
    DIRECTIVES_DEFINITION,
    GO_FIELD_DIRECTIVE_DEFINITION,
    KEY_DIRECTIVE_DEFINITION,
    REPLACES_DIRECTIVE_DEFINITION,
    GoFieldDirective,
    KeyDirective,
    ReplacesDirective,
)
from .schema_loading import DefinitionInfo, DefinitionKind, load_schema_ast  # noqa


__package_name__ = "graphql-replaces"
__version__ = "1.0.0"
