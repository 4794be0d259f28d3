from collections.abc import Sequence
from typing import Protocol

from proto_lint.models import SchemaFile


class SchemaLoader(Protocol):
    def load(self, schema_paths: Sequence[str], import_paths: Sequence[str] = ()) -> list[SchemaFile]: ...
