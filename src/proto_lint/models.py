from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

_HTTP_PATTERNS = ("get", "put", "post", "delete", "patch", "custom")


class MessageType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    file: str


class Method(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    input_type: MessageType
    output_type: MessageType
    options: dict[str, Any] = Field(default_factory=dict)


class Service(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    file: str
    methods: list[Method] = Field(default_factory=list)


class SchemaFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    services: list[Service] = Field(default_factory=list)
    message_types: list[MessageType] = Field(default_factory=list)


class CustomHttpPattern(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str = ""
    path: str = ""


class HttpRule(BaseModel):
    """Typed form of the ``google.api.http`` method option.

    Mirrors the JSON mapping of ``google.api.HttpRule``: at most one pattern
    field is set (the oneof may be empty), ``body`` names the request field
    bound to the HTTP body. Additional bindings are kept as raw mappings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    selector: str = ""
    get: str | None = None
    put: str | None = None
    post: str | None = None
    delete: str | None = None
    patch: str | None = None
    custom: CustomHttpPattern | None = None
    body: str = ""
    response_body: str = ""
    additional_bindings: list[dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_single_pattern(self) -> "HttpRule":
        present = [name for name in _HTTP_PATTERNS if getattr(self, name) is not None]
        if len(present) > 1:
            raise ValueError(f"at most one HTTP pattern may be set, got {present}")
        return self

    @property
    def kind(self) -> str | None:
        return next((name for name in _HTTP_PATTERNS if getattr(self, name) is not None), None)

    @property
    def url(self) -> str | None:
        if self.kind is None:
            return None
        value = getattr(self, self.kind)
        return value if isinstance(value, str) else None


class RuleKind(StrEnum):
    FILE_NAME = "file_name"
    REQUEST_TYPE_NAME = "request_type_name"
    RESPONSE_TYPE_NAME = "response_type_name"
    REQUEST_TYPE_LOCATION = "request_type_location"
    RESPONSE_TYPE_LOCATION = "response_type_location"
    HTTP_RULE_MISSING = "http_rule_missing"
    HTTP_METHOD = "http_method"
    HTTP_BODY = "http_body"
    HTTP_ADDITIONAL_BINDINGS = "http_additional_bindings"
    HTTP_URL = "http_url"
    MESSAGE_LOCATION = "message_location"


RULE_DESCRIPTIONS: dict[RuleKind, str] = {
    RuleKind.FILE_NAME: "Service file is named <snake_case(Service)>.proto",
    RuleKind.REQUEST_TYPE_NAME: "Request message is named <Method>Request",
    RuleKind.RESPONSE_TYPE_NAME: "Response message is named <Method>Response",
    RuleKind.REQUEST_TYPE_LOCATION: "Request message is declared in the service's file",
    RuleKind.RESPONSE_TYPE_LOCATION: "Response message is declared in the service's file",
    RuleKind.HTTP_RULE_MISSING: "Method carries a google.api.http annotation",
    RuleKind.HTTP_METHOD: "HTTP binding uses GET or POST",
    RuleKind.HTTP_BODY: 'POST binding uses body "*"',
    RuleKind.HTTP_ADDITIONAL_BINDINGS: "HTTP binding has no additional bindings",
    RuleKind.HTTP_URL: "HTTP binding URL is /<Service>/<Method>",
    RuleKind.MESSAGE_LOCATION: "Model messages are not declared in *_service.proto files",
}


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: RuleKind
    entity: str
    message: str
    expected: str | None = None
    actual: str | None = None

    def __str__(self) -> str:
        return self.message
