import re

from proto_lint.models import Method, MessageType, RuleKind, SchemaFile, Service, Violation

# Acronym runs stay together unless the last capital starts a new word: HTTPServer -> HTTP, Server
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

_MODEL_SUFFIXES = ("Request", "Response")
_SERVICE_FILE_SUFFIX = "_service.proto"


def to_snake_case(identifier: str) -> str:
    return "_".join(word.lower() for word in _WORD_RE.findall(identifier))


def base_name(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def method_label(service: Service, method: Method) -> str:
    return f"{service.name}.{method.name}"


def check_file_name(file: SchemaFile, service: Service) -> Violation | None:
    want = to_snake_case(service.name) + ".proto"
    got = base_name(file.name)
    if want == got:
        return None
    return Violation(
        kind=RuleKind.FILE_NAME,
        entity=service.name,
        expected=want,
        actual=got,
        message=f"error: {service.name}: file name must be {want}, got={got}",
    )


def _check_type_name(
    service: Service, method: Method, message: MessageType, suffix: str, kind: RuleKind
) -> Violation | None:
    want = method.name + suffix
    got = message.name
    if want == got:
        return None
    label = method_label(service, method)
    return Violation(
        kind=kind,
        entity=label,
        expected=want,
        actual=got,
        message=f"error: {label}: {suffix}Name want={want}, got={got}",
    )


def check_request_type_name(service: Service, method: Method) -> Violation | None:
    return _check_type_name(service, method, method.input_type, "Request", RuleKind.REQUEST_TYPE_NAME)


def check_response_type_name(service: Service, method: Method) -> Violation | None:
    return _check_type_name(service, method, method.output_type, "Response", RuleKind.RESPONSE_TYPE_NAME)


def _check_type_location(
    service: Service, method: Method, message: MessageType, role: str, kind: RuleKind
) -> Violation | None:
    want = service.file
    got = message.file
    if want == got:
        return None
    label = method_label(service, method)
    return Violation(
        kind=kind,
        entity=label,
        expected=want,
        actual=got,
        message=f"error: {label}: {role} type {message.name} must be in {want}, got={got}",
    )


def check_request_type_location(service: Service, method: Method) -> Violation | None:
    return _check_type_location(service, method, method.input_type, "request", RuleKind.REQUEST_TYPE_LOCATION)


def check_response_type_location(service: Service, method: Method) -> Violation | None:
    return _check_type_location(service, method, method.output_type, "response", RuleKind.RESPONSE_TYPE_LOCATION)


def check_message_location(message: MessageType) -> Violation | None:
    """Only request/response messages may live in a ``*_service.proto`` file."""
    if message.name.endswith(_MODEL_SUFFIXES):
        return None
    if not message.file.endswith(_SERVICE_FILE_SUFFIX):
        return None
    return Violation(
        kind=RuleKind.MESSAGE_LOCATION,
        entity=message.name,
        actual=message.file,
        message=f"error: {message.name}: model message must not be in {_SERVICE_FILE_SUFFIX} file, got={message.file}",
    )
