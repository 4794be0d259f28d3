"""Tests for the proto-lint CLI."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from proto_lint.cli.app import app
from proto_lint.errors import SchemaParseError
from tests.builders import make_file, make_method

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [[], ["lint"], ["rules"]],
    ids=["root", "lint", "rules"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def _loader_returning(*files: object) -> MagicMock:
    loader = MagicMock()
    loader.load.return_value = list(files)
    return loader


def test_lint_clean_exits_zero() -> None:
    loader = _loader_returning(make_file())
    with patch("proto_lint.cli.lint._get_loader", return_value=loader):
        result = runner.invoke(app, ["lint", "user_service.proto"])

    assert result.exit_code == 0
    assert "no violations" in result.output


def test_lint_violations_exit_one_and_are_printed() -> None:
    loader = _loader_returning(make_file(name="users.proto", methods=[make_method(file="users.proto")]))
    with patch("proto_lint.cli.lint._get_loader", return_value=loader):
        result = runner.invoke(app, ["lint", "users.proto"])

    assert result.exit_code == 1
    assert "file name must be user_service.proto, got=users.proto" in result.output
    assert "1 violation(s)" in result.output


def test_lint_parse_error_exits_one() -> None:
    loader = MagicMock()
    loader.load.side_effect = SchemaParseError("Schema file not found: missing.proto")
    with patch("proto_lint.cli.lint._get_loader", return_value=loader):
        result = runner.invoke(app, ["lint", "missing.proto"])

    assert result.exit_code == 1
    assert "Unable to parse proto files" in result.output


def test_lint_passes_import_paths(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROTO_LINT_IMPORT_PATH", "/env/protos")
    loader = _loader_returning()
    with patch("proto_lint.cli.lint._get_loader", return_value=loader):
        result = runner.invoke(app, ["lint", "a.proto", "b.proto", "-I", "protos", "--import-path", "vendor"])

    assert result.exit_code == 0
    loader.load.assert_called_once_with(["a.proto", "b.proto"], ["/env/protos", "protos", "vendor"])


def test_lint_requires_paths() -> None:
    result = runner.invoke(app, ["lint"])
    assert result.exit_code != 0


def test_rules_lists_every_rule() -> None:
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    assert "(11 rules)" in result.output


def test_lint_tolerates_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROTO_LINT_LOG_LEVEL", "verbose")
    loader = _loader_returning(make_file())
    with patch("proto_lint.cli.lint._get_loader", return_value=loader):
        result = runner.invoke(app, ["lint", "user_service.proto"])

    assert result.exit_code == 0
