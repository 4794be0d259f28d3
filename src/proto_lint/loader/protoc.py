"""Load ``.proto`` files into the schema model using the bundled ``protoc``.

``grpcio-tools`` compiles the requested files (plus their imports) into a
``FileDescriptorSet``; the descriptors are then mapped onto
:mod:`proto_lint.models`. Method options are converted to plain mappings so
the ``google.api.http`` extension ends up in ``Method.options``.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterable, Sequence
from importlib import resources
from pathlib import Path
from typing import Any

from google.api import annotations_pb2
from google.protobuf import descriptor_pb2, json_format
from google.protobuf.message import DecodeError
from grpc_tools import protoc

from proto_lint.core.http import HTTP_RULE_OPTION
from proto_lint.errors import SchemaParseError
from proto_lint.models import Method, MessageType, SchemaFile, Service

logger = logging.getLogger(__name__)


def _well_known_include() -> str:
    return str(resources.files("grpc_tools") / "_proto")


def _googleapis_include() -> str:
    # google/api/annotations.proto ships next to annotations_pb2.py
    return str(Path(annotations_pb2.__file__).resolve().parent.parent.parent)


def _relative_name(path: Path, include_paths: Iterable[Path]) -> str | None:
    for include in include_paths:
        try:
            return path.relative_to(include).as_posix()
        except ValueError:
            continue
    return None


def _message_index(files: Iterable[descriptor_pb2.FileDescriptorProto]) -> dict[str, MessageType]:
    """Map fully-qualified message names (``.pkg.Outer.Inner``) to their declaring file."""
    index: dict[str, MessageType] = {}

    def visit(prefix: str, messages: Iterable[descriptor_pb2.DescriptorProto], file_name: str) -> None:
        for message in messages:
            full_name = f"{prefix}.{message.name}"
            index[full_name] = MessageType(name=message.name, file=file_name)
            visit(full_name, message.nested_type, file_name)

    for fd in files:
        prefix = f".{fd.package}" if fd.package else ""
        visit(prefix, fd.message_type, fd.name)
    return index


def _method_options(options: descriptor_pb2.MethodOptions) -> dict[str, Any]:
    bag: dict[str, Any] = {}
    if options.HasExtension(annotations_pb2.http):
        bag[HTTP_RULE_OPTION] = json_format.MessageToDict(
            options.Extensions[annotations_pb2.http], preserving_proto_field_name=True
        )
    return bag


def _resolve(index: dict[str, MessageType], type_name: str, file_name: str) -> MessageType:
    try:
        return index[type_name]
    except KeyError:
        raise SchemaParseError(f"{file_name}: unresolved message type {type_name}") from None


def to_schema_file(fd: descriptor_pb2.FileDescriptorProto, index: dict[str, MessageType]) -> SchemaFile:
    services = [
        Service(
            name=service.name,
            file=fd.name,
            methods=[
                Method(
                    name=method.name,
                    input_type=_resolve(index, method.input_type, fd.name),
                    output_type=_resolve(index, method.output_type, fd.name),
                    options=_method_options(method.options),
                )
                for method in service.method
            ],
        )
        for service in fd.service
    ]
    return SchemaFile(
        name=fd.name,
        services=services,
        message_types=[MessageType(name=m.name, file=fd.name) for m in fd.message_type],
    )


class ProtocSchemaLoader:
    """Schema loader backed by ``grpc_tools.protoc``.

    Implements the ``SchemaLoader`` protocol.
    """

    def load(self, schema_paths: Sequence[str], import_paths: Sequence[str] = ()) -> list[SchemaFile]:
        paths = [Path(p).resolve() for p in schema_paths]
        for path in paths:
            if not path.is_file():
                raise SchemaParseError(f"Schema file not found: {path}")

        includes = [Path(p).resolve() for p in import_paths]
        names: list[str] = []
        for path in paths:
            name = _relative_name(path, includes)
            if name is None:
                includes.append(path.parent)
                name = path.name
            names.append(name)

        descriptor_set = self._compile(names, includes)
        index = _message_index(descriptor_set.file)
        by_name = {fd.name: fd for fd in descriptor_set.file}
        logger.debug("protoc produced %d file descriptors", len(by_name))

        missing = [name for name in names if name not in by_name]
        if missing:
            raise SchemaParseError(f"protoc did not emit descriptors for: {', '.join(missing)}")
        return [to_schema_file(by_name[name], index) for name in names]

    def _compile(self, names: Sequence[str], includes: Sequence[Path]) -> descriptor_pb2.FileDescriptorSet:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "descriptors.pb"
            args = [
                "grpc_tools.protoc",
                *(f"--proto_path={include}" for include in includes),
                f"--proto_path={_googleapis_include()}",
                f"--proto_path={_well_known_include()}",
                "--include_imports",
                f"--descriptor_set_out={out}",
                *names,
            ]
            logger.debug("Running %s", " ".join(args))
            status = protoc.main(args)
            if status != 0:
                raise SchemaParseError(f"Unable to parse proto files {', '.join(names)} (protoc exit status {status})")
            try:
                return descriptor_pb2.FileDescriptorSet.FromString(out.read_bytes())
            except (OSError, DecodeError) as exc:
                raise SchemaParseError(f"Unable to read descriptor set: {exc}") from exc
