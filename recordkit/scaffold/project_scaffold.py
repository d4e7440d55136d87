"""Project scaffold generator — renders CLI and library project skeletons.

Templates carry two placeholder tokens that are filled in at generation time:

- ``{{name}}`` — the package name, snake_case (``order-book`` → ``order_book``)
- ``{{Name}}`` — the entity name, PascalCase (``order-book`` → ``OrderBook``)

Tokens may appear in file paths as well as file contents.
"""

from __future__ import annotations

import builtins
import keyword
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from recordkit.errors import InvalidInputError, ScaffoldIOError
from recordkit.utils.validator import require_non_empty

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


# ---------------------------------------------------------------------------
# Shared template content
# ---------------------------------------------------------------------------

_ERRORS_TEMPLATE = '''\
"""Error types for {{name}}."""


class {{Name}}Error(Exception):
    """Base class for {{name}} errors."""


class InvalidInputError({{Name}}Error, ValueError):
    """An argument was missing, empty, or out of range."""


class NotFoundError({{Name}}Error, LookupError):
    """The requested item does not exist."""
'''

_README_TEMPLATE = """\
# {{name}}

Generated by `recordkit scaffold`.

```bash
pip install -e .[test]
pytest
```
"""


# ---------------------------------------------------------------------------
# CLI application skeleton
# ---------------------------------------------------------------------------

_CLI_PYPROJECT = """\
[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "{{name}}"
version = "0.1.0"
requires-python = ">=3.10"
dependencies = ["click>=8.0", "rich>=13.0"]

[project.optional-dependencies]
test = ["pytest>=7.0"]

[project.scripts]
{{name}} = "{{name}}.cli:main"
"""

_CLI_INIT = '''\
"""{{name}} — command-line application."""

__version__ = "0.1.0"
'''

_CLI_MAIN = '''\
"""{{name}} CLI entry point."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from {{name}} import __version__
from {{name}}.errors import InvalidInputError

console = Console()
logger = logging.getLogger("{{name}}")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(verbose: bool):
    """{{Name}} command-line application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command()
@click.argument("path", type=click.Path(path_type=Path))
def process(path: Path):
    """Process a file or directory."""
    if not path.exists():
        raise click.ClickException(str(InvalidInputError(f"Path not found: {path}")))
    logger.info("Processing: %s", path)
    console.print("[green]Processed successfully[/]")


@main.command()
@click.option("--config", "-c", "config_path", required=True, type=click.Path(path_type=Path))
def validate(config_path: Path):
    """Validate a configuration file."""
    if not config_path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")
    if not config_path.read_text().strip():
        raise click.ClickException("Configuration file is empty")
    console.print("[green]Configuration is valid[/]")


@main.command()
@click.option("--output", "-o", default=None, type=click.Path(path_type=Path))
def report(output: Path | None):
    """Generate a status report."""
    data = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "success",
    }
    text = json.dumps(data, indent=2)
    if output:
        output.write_text(text)
        console.print(f"Report saved to: {output}")
    else:
        console.print(text)


if __name__ == "__main__":
    main()
'''

_CLI_TEST = '''\
"""Tests for the {{name}} CLI."""

from click.testing import CliRunner

from {{name}}.cli import main


def test_report_prints_status():
    result = CliRunner().invoke(main, ["report"])
    assert result.exit_code == 0
    assert "success" in result.output


def test_process_missing_path():
    result = CliRunner().invoke(main, ["process", "does-not-exist"])
    assert result.exit_code != 0
'''


# ---------------------------------------------------------------------------
# Library skeleton
# ---------------------------------------------------------------------------

_LIB_PYPROJECT = """\
[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "{{name}}"
version = "0.1.0"
requires-python = ">=3.10"
dependencies = []

[project.optional-dependencies]
test = ["pytest>=7.0"]
"""

_LIB_INIT = '''\
"""{{name}} — library package."""

from {{name}}.errors import {{Name}}Error, InvalidInputError, NotFoundError
from {{name}}.models import {{Name}}Model
from {{name}}.services import {{Name}}Service

__version__ = "0.1.0"

__all__ = [
    "{{Name}}Error",
    "{{Name}}Model",
    "{{Name}}Service",
    "InvalidInputError",
    "NotFoundError",
]
'''

_LIB_MODELS = '''\
"""Data models for {{name}}."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class {{Name}}Model:
    """A {{name}} entity."""

    id: int
    name: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
'''

_LIB_SERVICES = '''\
"""Service layer for {{name}}."""

from __future__ import annotations

import logging

from {{name}}.errors import NotFoundError
from {{name}}.models import {{Name}}Model
from {{name}}.validation import require_non_empty, require_in_range

logger = logging.getLogger(__name__)


class {{Name}}Service:
    """Creates and looks up {{Name}}Model instances."""

    def __init__(self):
        self._items: dict[int, {{Name}}Model] = {}

    def create_data(self, name: str, description: str | None = None) -> {{Name}}Model:
        require_non_empty(name, "name")
        item = {{Name}}Model(id=len(self._items) + 1, name=name, description=description)
        self._items[item.id] = item
        logger.info("Created %s %d", "{{name}}", item.id)
        return item

    def get_data(self, item_id: int) -> {{Name}}Model:
        require_in_range(item_id, 1, 2**31 - 1, "id")
        try:
            return self._items[item_id]
        except KeyError:
            raise NotFoundError(f"No {{name}} with id {item_id}") from None
'''

_LIB_VALIDATION = '''\
"""Validation helpers for {{name}}."""

from {{name}}.errors import InvalidInputError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise InvalidInputError(f"{field_name} cannot be null or empty")
    return value


def require_in_range(value: int, minimum: int, maximum: int, field_name: str) -> int:
    if value < minimum or value > maximum:
        raise InvalidInputError(f"{field_name} must be between {minimum} and {maximum}")
    return value
'''

_LIB_TEST = '''\
"""Tests for the {{name}} service."""

import pytest

from {{name}} import {{Name}}Service, InvalidInputError, NotFoundError


def test_create_and_get():
    service = {{Name}}Service()
    item = service.create_data("Item 1", "Description")
    assert item.id == 1
    assert service.get_data(1) is item


def test_create_rejects_empty_name():
    with pytest.raises(InvalidInputError):
        {{Name}}Service().create_data("")


def test_get_missing():
    with pytest.raises(NotFoundError):
        {{Name}}Service().get_data(1)
'''


TEMPLATES: dict[str, dict[str, str]] = {
    "cli": {
        "pyproject.toml": _CLI_PYPROJECT,
        "README.md": _README_TEMPLATE,
        "{{name}}/__init__.py": _CLI_INIT,
        "{{name}}/cli.py": _CLI_MAIN,
        "{{name}}/errors.py": _ERRORS_TEMPLATE,
        "tests/test_cli.py": _CLI_TEST,
    },
    "library": {
        "pyproject.toml": _LIB_PYPROJECT,
        "README.md": _README_TEMPLATE,
        "{{name}}/__init__.py": _LIB_INIT,
        "{{name}}/errors.py": _ERRORS_TEMPLATE,
        "{{name}}/models.py": _LIB_MODELS,
        "{{name}}/services.py": _LIB_SERVICES,
        "{{name}}/validation.py": _LIB_VALIDATION,
        "tests/test_services.py": _LIB_TEST,
    },
}


def package_name(name: str) -> str:
    """``Order-Book`` → ``order_book``."""
    return name.replace("-", "_").lower()


def entity_name(name: str) -> str:
    """``order-book`` → ``OrderBook``; an existing PascalCase part is kept."""
    parts = re.split(r"[-_]+", name)
    return "".join(p[:1].upper() + p[1:] for p in parts if p)


def render(template: str, name: str) -> str:
    """Substitute ``{{Name}}`` and ``{{name}}`` in a template string."""
    return (
        template.replace("{{Name}}", entity_name(name))
        .replace("{{name}}", package_name(name))
    )


@dataclass
class ScaffoldResult:
    """Outcome of generating one project skeleton."""

    kind: str
    name: str
    root: Path
    files: list[Path] = field(default_factory=list)


class ProjectScaffold:
    """Writes rendered project skeletons under an output directory.

    Structure (``kind="library"``, ``name="order-book"``):
        order_book/
        ├── pyproject.toml
        ├── README.md
        ├── order_book/
        │   ├── __init__.py
        │   ├── errors.py
        │   ├── models.py        # OrderBookModel
        │   ├── services.py      # OrderBookService
        │   └── validation.py
        └── tests/
            └── test_services.py
    """

    def __init__(self, output_root: str | Path):
        self.output_root = Path(output_root)

    @staticmethod
    def kinds() -> list[str]:
        return sorted(TEMPLATES)

    def generate(self, kind: str, name: str, force: bool = False) -> ScaffoldResult:
        """Render template ``kind`` for project ``name``.

        Raises InvalidInputError for an unknown kind, an invalid name, or a
        non-empty target directory when ``force`` is False. Raises
        ScaffoldIOError when the target cannot be written.
        """
        require_non_empty(kind, "kind")
        require_non_empty(name, "name")
        if kind not in TEMPLATES:
            raise InvalidInputError(
                f"Unknown template '{kind}'. Must be one of: {', '.join(self.kinds())}"
            )
        if not _NAME_RE.match(name):
            raise InvalidInputError(
                f"Invalid project name '{name}': use letters, digits, '-' or '_', "
                "starting with a letter"
            )
        pkg = package_name(name)
        if not pkg.isidentifier() or keyword.iskeyword(pkg):
            raise InvalidInputError(f"Invalid project name '{name}': '{pkg}' is a Python keyword")
        if hasattr(builtins, f"{entity_name(name)}Error"):
            raise InvalidInputError(
                f"Invalid project name '{name}': {entity_name(name)}Error would shadow a builtin"
            )

        root = self.output_root / pkg
        result = ScaffoldResult(kind=kind, name=name, root=root)
        try:
            if root.exists() and any(root.iterdir()) and not force:
                raise InvalidInputError(f"Target directory is not empty: {root}")

            logger.info("Generating %s project '%s' in %s", kind, name, root)
            for rel_path, template in TEMPLATES[kind].items():
                target = root / render(rel_path, name)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(render(template, name), encoding="utf-8")
                logger.debug("Wrote %s", target)
                result.files.append(target)
        except OSError as e:
            raise ScaffoldIOError(f"Cannot write project to {root}: {e}") from e

        return result
