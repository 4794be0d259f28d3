"""Convention linter for protobuf service definitions."""

from proto_lint.core.lint import lint
from proto_lint.models import Method, MessageType, RuleKind, SchemaFile, Service, Violation

__all__ = [
    "MessageType",
    "Method",
    "RuleKind",
    "SchemaFile",
    "Service",
    "Violation",
    "lint",
]
