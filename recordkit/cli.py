"""recordkit CLI — drive the record registry and the project scaffold generator."""

import logging
import sys

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from recordkit import __version__, config

console = Console()
logger = logging.getLogger("recordkit")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """recordkit — in-memory record registry and project scaffolding.

    The registry lives only for the duration of one command: records are
    loaded from a YAML seed file, queried or exported, then discarded.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _fail(message: str):
    console.print(f"[red]Error:[/] {escape(message)}")
    sys.exit(1)


def _load_seed(seed_path: str):
    """Build a registry from a seed file of the form ``records: [{name, email}]``."""
    from recordkit.errors import RecordkitError, SerializationError
    from recordkit.registry.record_registry import RecordRegistry

    try:
        with open(seed_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        _fail(str(SerializationError(f"Invalid seed file {seed_path}: {e}")))
    except OSError as e:
        _fail(f"Cannot read seed file {seed_path}: {e}")

    entries = data.get("records", []) if isinstance(data, dict) else None
    if not isinstance(entries, list):
        _fail(f"Seed file {seed_path} must contain a 'records' list")

    reg = RecordRegistry()
    for i, entry in enumerate(entries):
        entry = entry if isinstance(entry, dict) else {}
        try:
            reg.create(entry.get("name", ""), entry.get("email", ""))
        except RecordkitError as e:
            _fail(f"Seed record {i + 1}: {e}")
    logger.debug("Loaded %d record(s) from %s", len(reg), seed_path)
    return reg


def _records_table(title: str, records) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Email")
    for r in records:
        table.add_row(str(r.id), r.name, r.email)
    return table


# ── Records ──────────────────────────────────────────────────────────


@main.group()
def records():
    """Create, query, and export records."""


@records.command(name="export")
@click.argument("seed_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", required=True, help="Destination file (.json, .yaml or .yml)")
def export_records(seed_path: str, output: str):
    """Load SEED_PATH into a registry and export every record."""
    from recordkit.errors import RecordkitError

    reg = _load_seed(seed_path)
    try:
        reg.export_all(output)
    except RecordkitError as e:
        _fail(str(e))
    console.print(f"[green]Exported {len(reg)} record(s) to:[/] {output}")


@records.command()
@click.argument("seed_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("term")
def find(seed_path: str, term: str):
    """List records whose name contains TERM (case-sensitive)."""
    reg = _load_seed(seed_path)
    matches = reg.find_by_name(term)

    if not matches:
        console.print("[yellow]No matching records found.[/]")
        return

    console.print(_records_table(f"Matches for '{term}' ({len(matches)})", matches))


@records.command()
@click.argument("seed_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("record_id", type=int)
def show(seed_path: str, record_id: int):
    """Show the record with id RECORD_ID."""
    reg = _load_seed(seed_path)
    record = reg.get(record_id)

    if record is None:
        console.print(f"[yellow]No record with id {record_id}.[/]")
        return

    console.print(Panel(f"{record.name}\n{record.email}", title=f"Record {record.id}"))


@records.command()
@click.option("--output", "-o", default=None, help="Also export the demo registry here")
def demo(output: str | None):
    """Run the John Doe / Jane walkthrough against a fresh registry."""
    from recordkit.errors import RecordkitError
    from recordkit.registry.record_registry import RecordRegistry

    reg = RecordRegistry()
    john = reg.create("John Doe", "john@example.com")
    jane = reg.create("Jane", "jane@example.com")
    console.print(f"  Created: {john.id} {john.name}")
    console.print(f"  Created: {jane.id} {jane.name}")
    console.print(f"  get(1) -> {reg.get(1).name}")
    console.print(f"  find_by_name('Jane') -> {[r.name for r in reg.find_by_name('Jane')]}")
    console.print(f"  find_by_name('J') -> {[r.name for r in reg.find_by_name('J')]}")

    if output:
        try:
            reg.export_all(output)
        except RecordkitError as e:
            _fail(str(e))
        console.print(f"[green]Exported to:[/] {output}")


# ── Scaffold ─────────────────────────────────────────────────────────


@main.command()
@click.argument("kind", type=click.Choice(["cli", "library"]))
@click.argument("name")
@click.option("--output", "-o", default=None, help="Parent directory for the new project")
@click.option("--force", is_flag=True, help="Write into a non-empty target directory")
def scaffold(kind: str, name: str, output: str | None, force: bool):
    """Generate a KIND project skeleton called NAME."""
    from recordkit.errors import RecordkitError
    from recordkit.scaffold.project_scaffold import ProjectScaffold

    generator = ProjectScaffold(output or config.SCAFFOLD_DIR)
    try:
        result = generator.generate(kind, name, force=force)
    except RecordkitError as e:
        _fail(str(e))

    console.print(f"\n[bold blue]recordkit[/] — {kind} project written to: {result.root}\n")
    for path in result.files:
        console.print(f"  [green]+[/] {path.relative_to(result.root)}")


if __name__ == "__main__":
    main()
