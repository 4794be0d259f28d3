from proto_lint.loader.protoc import ProtocSchemaLoader

__all__ = ["ProtocSchemaLoader"]
