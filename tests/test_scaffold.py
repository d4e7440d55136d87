"""Tests for the project scaffold generator."""

import tempfile
from pathlib import Path

import pytest

from recordkit.errors import InvalidInputError, ScaffoldIOError
from recordkit.scaffold.project_scaffold import (
    ProjectScaffold,
    entity_name,
    package_name,
    render,
)


def test_name_derivation():
    assert package_name("order-book") == "order_book"
    assert package_name("Inventory") == "inventory"
    assert entity_name("order-book") == "OrderBook"
    assert entity_name("order_book") == "OrderBook"
    assert entity_name("inventory") == "Inventory"


def test_render_replaces_both_tokens():
    text = render("class {{Name}}Service:  # {{name}}", "order-book")
    assert text == "class OrderBookService:  # order_book"


def test_generate_library():
    with tempfile.TemporaryDirectory() as tmpdir:
        result = ProjectScaffold(tmpdir).generate("library", "order-book")
        root = Path(tmpdir) / "order_book"

        assert result.root == root
        assert (root / "pyproject.toml").exists()
        assert (root / "order_book" / "models.py").exists()
        services = (root / "order_book" / "services.py").read_text()
        assert "class OrderBookService:" in services
        assert "from order_book.models import OrderBookModel" in services

        for path in result.files:
            assert "{{" not in path.read_text()
            assert "{{" not in str(path)


def test_generate_cli():
    with tempfile.TemporaryDirectory() as tmpdir:
        result = ProjectScaffold(tmpdir).generate("cli", "tasker")
        cli = (Path(tmpdir) / "tasker" / "tasker" / "cli.py").read_text()
        assert "from tasker import __version__" in cli
        assert 'tasker = "tasker.cli:main"' in (result.root / "pyproject.toml").read_text()


def test_generated_python_compiles():
    with tempfile.TemporaryDirectory() as tmpdir:
        for kind in ProjectScaffold.kinds():
            result = ProjectScaffold(tmpdir).generate(kind, f"demo-{kind}")
            for path in result.files:
                if path.suffix == ".py":
                    compile(path.read_text(), str(path), "exec")


def test_unknown_kind():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(InvalidInputError, match="Unknown template"):
            ProjectScaffold(tmpdir).generate("service", "demo")


def test_invalid_name():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(InvalidInputError):
            ProjectScaffold(tmpdir).generate("cli", "1bad name")
        with pytest.raises(InvalidInputError):
            ProjectScaffold(tmpdir).generate("cli", "")
        for keyword_name in ("import", "class", "def", "While"):
            with pytest.raises(InvalidInputError, match="keyword"):
                ProjectScaffold(tmpdir).generate("library", keyword_name)
        with pytest.raises(InvalidInputError, match="shadow a builtin"):
            ProjectScaffold(tmpdir).generate("library", "value")
        assert list(Path(tmpdir).iterdir()) == []


def test_refuses_non_empty_target():
    with tempfile.TemporaryDirectory() as tmpdir:
        scaffold = ProjectScaffold(tmpdir)
        scaffold.generate("cli", "demo")
        with pytest.raises(InvalidInputError, match="not empty"):
            scaffold.generate("cli", "demo")
        assert scaffold.generate("cli", "demo", force=True).files


def test_unwritable_target():
    with tempfile.TemporaryDirectory() as tmpdir:
        blocker = Path(tmpdir) / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(ScaffoldIOError):
            ProjectScaffold(blocker).generate("cli", "demo")
        with pytest.raises(OSError):
            ProjectScaffold(blocker).generate("library", "demo")
