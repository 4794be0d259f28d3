import logging
from collections.abc import Iterable, Sequence

from proto_lint.core.http import (
    check_http_additional_bindings,
    check_http_body,
    check_http_method,
    check_http_url,
    decode_http_rule,
    missing_http_rule,
)
from proto_lint.core.naming import (
    check_file_name,
    check_message_location,
    check_request_type_location,
    check_request_type_name,
    check_response_type_location,
    check_response_type_name,
)
from proto_lint.errors import HttpRuleNotFoundError
from proto_lint.models import Method, SchemaFile, Service, Violation

logger = logging.getLogger(__name__)


def _found(results: Iterable[Violation | None]) -> list[Violation]:
    return [v for v in results if v is not None]


def _lint_method(service: Service, method: Method) -> list[Violation]:
    violations = _found(
        [
            check_request_type_name(service, method),
            check_response_type_name(service, method),
            check_request_type_location(service, method),
            check_response_type_location(service, method),
        ]
    )

    try:
        rule = decode_http_rule(method.options)
    except HttpRuleNotFoundError as exc:
        logger.debug("Skipping HTTP checks for %s.%s: %s", service.name, method.name, exc)
        violations.append(missing_http_rule(service, method))
        return violations

    violations.extend(
        _found(
            [
                check_http_method(service, method, rule),
                check_http_body(service, method, rule),
                check_http_additional_bindings(service, method, rule),
                check_http_url(service, method, rule),
            ]
        )
    )
    return violations


def lint(files: Sequence[SchemaFile]) -> list[Violation]:
    """Check every service, method and message in ``files`` against the conventions.

    Returns all violations in traversal order: per file, services and their
    methods first, then the file's messages. An empty list means the files
    are clean. Findings are never raised.
    """
    violations: list[Violation] = []

    for file in files:
        logger.debug(
            "Linting %s (%d services, %d messages)", file.name, len(file.services), len(file.message_types)
        )
        for service in file.services:
            violations.extend(_found([check_file_name(file, service)]))
            for method in service.methods:
                violations.extend(_lint_method(service, method))

        violations.extend(_found(check_message_location(message) for message in file.message_types))

    logger.debug("Lint finished with %d violations across %d files", len(violations), len(files))
    return violations
