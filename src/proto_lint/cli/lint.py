import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from proto_lint.config import get_import_paths, get_log_level
from proto_lint.core.lint import lint
from proto_lint.core.ports.loader import SchemaLoader
from proto_lint.errors import SchemaParseError

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _get_loader() -> SchemaLoader:
    from proto_lint.loader.protoc import ProtocSchemaLoader

    return ProtocSchemaLoader()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def lint_command(
    paths: Annotated[list[str], typer.Argument(help="Proto files to lint.")],
    import_path: Annotated[
        list[str] | None,
        typer.Option("--import-path", "-I", help="Directory to search for imports (repeatable)."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Lint proto files and report every convention violation."""
    _configure_logging(verbose)
    import_paths = [*get_import_paths(), *(import_path or [])]
    logger.debug("Import paths: %s", import_paths)

    try:
        files = _get_loader().load(paths, import_paths)
    except SchemaParseError as exc:
        err_console.print(f"[red]Unable to parse proto files:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    violations = lint(files)
    for violation in violations:
        err_console.print(escape(str(violation)), highlight=False, soft_wrap=True)

    if violations:
        err_console.print(f"[red]{len(violations)} violation(s)[/red] in {len(files)} file(s)")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] {len(files)} file(s) checked, no violations")
