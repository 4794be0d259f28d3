from rich.console import Console
from rich.table import Table

from proto_lint.models import RULE_DESCRIPTIONS

console = Console()


def rules_command() -> None:
    """List the conventions every proto file is checked against."""
    table = Table(show_lines=False)
    table.add_column("rule")
    table.add_column("convention")
    for kind, description in RULE_DESCRIPTIONS.items():
        table.add_row(kind.value, description)
    console.print(table)
    console.print(f"({len(RULE_DESCRIPTIONS)} rules)")
