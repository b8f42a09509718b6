#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import sys
from pathlib import Path

# Add parent directory to path to import calrange
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
import typer

from calrange.cli import app
from calrange.config import DEFAULT_CALENDAR, DEFAULT_LIMIT, DEFAULT_LOG_LEVEL


def format_param(param: click.Parameter) -> str:
    """Format a click parameter as a markdown list item."""
    if isinstance(param, click.Argument):
        return f"- `{param.human_readable_name}` (required)"

    flags = ", ".join(f"`{flag}`" for flag in param.opts)
    line = f"- {flags}"
    help_text = getattr(param, "help", None)
    if help_text:
        line += f": {help_text}"
    if param.default not in (None, False):
        line += f" (default: {param.default})"
    return line


def generate_command_doc(name: str, command: click.Command) -> str:
    """Generate documentation for a single command."""
    doc = (command.help or "No description available.").strip()
    arguments = [p for p in command.params if isinstance(p, click.Argument)]
    options = [p for p in command.params if isinstance(p, click.Option)]

    usage = " ".join([f"uv run calrange {name}", *(a.human_readable_name for a in arguments)])
    lines = [f"### {name}", "", doc, "", "**Usage:**", "", "```bash", usage, "```", ""]

    if arguments:
        lines += ["**Arguments:**", "", *(format_param(a) for a in arguments), ""]
    if options:
        lines += ["**Options:**", "", *(format_param(o) for o in options), ""]

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    root = typer.main.get_command(app)
    if not isinstance(root, click.Group):
        raise TypeError("Expected the calrange app to be a command group")

    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "Complete reference for all calrange CLI commands and options.",
        "",
        "Dates are written as `YYYY-MM-DD` in the calendar selected with `--calendar`.",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
    ]
    for param in root.params:
        if isinstance(param, click.Option):
            lines.append(f"| `{', '.join(param.opts)}` | {getattr(param, 'help', '') or ''} |")
    lines += [
        "| `--help` | Show help message and exit |",
        "",
        "## Configuration",
        "",
        "| Key | Default |",
        "|-----|---------|",
        f"| `calendar` | `{DEFAULT_CALENDAR}` |",
        f"| `limit` | `{DEFAULT_LIMIT}` |",
        f"| `log_level` | `{DEFAULT_LOG_LEVEL}` |",
        "",
        "## Commands",
        "",
    ]

    for name in sorted(root.commands):
        lines.append(generate_command_doc(name, root.commands[name]))

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
