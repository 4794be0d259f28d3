"""Checks on the ``google.api.http`` binding attached to each RPC method."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from proto_lint.core.naming import method_label
from proto_lint.errors import HttpRuleNotFoundError
from proto_lint.models import HttpRule, Method, RuleKind, Service, Violation

HTTP_RULE_OPTION = "google.api.http"

_ALLOWED_PATTERNS = frozenset({"get", "post"})


def decode_http_rule(options: Mapping[str, Any]) -> HttpRule:
    """Decode the HTTP binding from a method's option bag.

    Raises ``HttpRuleNotFoundError`` when the option is absent or does not
    have the shape of a ``google.api.HttpRule``.
    """
    raw = options.get(HTTP_RULE_OPTION)
    if raw is None:
        raise HttpRuleNotFoundError(f"{HTTP_RULE_OPTION} option is not set")
    if isinstance(raw, HttpRule):
        return raw
    try:
        return HttpRule.model_validate(raw)
    except ValidationError as exc:
        raise HttpRuleNotFoundError(f"{HTTP_RULE_OPTION} option is malformed: {exc}") from exc


def missing_http_rule(service: Service, method: Method) -> Violation:
    label = method_label(service, method)
    return Violation(
        kind=RuleKind.HTTP_RULE_MISSING,
        entity=label,
        message=f"error: {label}: HTTP Rule not found",
    )


def check_http_method(service: Service, method: Method, rule: HttpRule) -> Violation | None:
    if rule.kind in _ALLOWED_PATTERNS:
        return None
    label = method_label(service, method)
    got = rule.kind.upper() if rule.kind else "none"
    return Violation(
        kind=RuleKind.HTTP_METHOD,
        entity=label,
        expected="GET or POST",
        actual=got,
        message=f"error: {label}: HTTP Rule HTTP method must use GET or POST, got={got}",
    )


def check_http_body(service: Service, method: Method, rule: HttpRule) -> Violation | None:
    # GET carries no templated body
    if rule.kind != "post" or rule.body == "*":
        return None
    label = method_label(service, method)
    return Violation(
        kind=RuleKind.HTTP_BODY,
        entity=label,
        expected="*",
        actual=rule.body,
        message=f"error: {label}: HTTP Rule Body is not *. got={rule.body}",
    )


def check_http_additional_bindings(service: Service, method: Method, rule: HttpRule) -> Violation | None:
    if not rule.additional_bindings:
        return None
    label = method_label(service, method)
    return Violation(
        kind=RuleKind.HTTP_ADDITIONAL_BINDINGS,
        entity=label,
        actual=str(len(rule.additional_bindings)),
        message=f"error: {label}: HTTP Rule must not use additional_bindings, got={len(rule.additional_bindings)}",
    )


def check_http_url(service: Service, method: Method, rule: HttpRule) -> Violation | None:
    if rule.kind not in _ALLOWED_PATTERNS:
        return None
    want = f"/{service.name}/{method.name}"
    got = rule.url
    if got == want:
        return None
    label = method_label(service, method)
    return Violation(
        kind=RuleKind.HTTP_URL,
        entity=label,
        expected=want,
        actual=got,
        message=f"error: {label}: HTTP want={want}, got={got}",
    )
