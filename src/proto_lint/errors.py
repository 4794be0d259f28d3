class ProtoLintError(Exception):
    """Base class for proto-lint errors."""


class SchemaParseError(ProtoLintError):
    """Schema files could not be loaded; no lint run is possible."""


class HttpRuleNotFoundError(ProtoLintError):
    """A method carries no usable ``google.api.http`` annotation."""
