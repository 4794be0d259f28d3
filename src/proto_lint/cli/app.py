import typer

from proto_lint.cli.lint import lint_command
from proto_lint.cli.rules import rules_command

app = typer.Typer(
    name="proto-lint",
    help="Check protobuf service definitions against naming and HTTP binding conventions.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("lint")(lint_command)
app.command("rules")(rules_command)


def main() -> None:
    app()
