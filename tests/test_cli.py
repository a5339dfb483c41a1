"""
Tests for the command line entry point.
"""

import json
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from modelgen.cli import build_parser, main
from modelgen.codegen.core.config import GeneratorConfig
from modelgen.codegen.provider import build_registry


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), width=200, color_system=None)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "modelgen.json"
    path.write_text(
        json.dumps(
            {
                "base_path": str(tmp_path / "app"),
                "connections": {"mysql": {"url": "sqlite://", "database": "shop"}},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def use_catalog(monkeypatch, catalog_factory):
    """Point every configured connection at the test catalog."""
    monkeypatch.setattr(
        GeneratorConfig, "create_engine", lambda self: catalog_factory()
    )


def run(console, *argv) -> int:
    return main(list(argv), console=console, registry=build_registry())


def output(console) -> str:
    return console.file.getvalue()


class TestParser:
    def test_model_arguments(self):
        parser = build_parser(build_registry())
        args = parser.parse_args(
            ["model", "Blog/Post", "--table", "t", "--extend", "Base", "--force"]
        )

        assert args.command == "model"
        assert args.name == "Blog/Post"
        assert args.table == "t"
        assert args.extend == "Base"
        assert args.force

    def test_alias(self):
        args = build_parser(build_registry()).parse_args(["make:model", "User"])
        assert args.name == "User"

    def test_name_is_required(self):
        with pytest.raises(SystemExit):
            build_parser(build_registry()).parse_args(["model"])


class TestMain:
    def test_creates_model(self, console, config_file, tmp_path):
        code = run(console, "--config", str(config_file), "model", "Blog/Post")

        assert code == 0
        assert "Model created successfully." in output(console)
        target = tmp_path / "app" / "Models" / "Blog" / "Post.php"
        assert "protected $fillable = ['title'];" in target.read_text(encoding="utf-8")

    def test_existing_model_fails(self, console, config_file, tmp_path):
        assert run(console, "--config", str(config_file), "model", "Blog/Post") == 0
        target = tmp_path / "app" / "Models" / "Blog" / "Post.php"
        before = target.read_bytes()

        code = run(console, "--config", str(config_file), "model", "Blog/Post")

        assert code == 1
        assert "Model already exists!" in output(console)
        assert target.read_bytes() == before

    def test_force(self, console, config_file):
        run(console, "--config", str(config_file), "model", "User")
        code = run(console, "--config", str(config_file), "model", "User", "--force")
        assert code == 0

    def test_dry_run(self, console, config_file, tmp_path):
        code = run(
            console, "--config", str(config_file), "model", "User", "--dry-run"
        )

        assert code == 0
        assert "class User extends Model" in output(console)
        assert not (tmp_path / "app").exists()

    def test_verbose_metadata(self, console, config_file):
        code = run(
            console, "--config", str(config_file), "model", "User", "--verbose"
        )

        assert code == 0
        assert "Generation Metadata" in output(console)
        assert "users" in output(console)

    def test_base_path_override(self, console, config_file, tmp_path):
        other = tmp_path / "other"
        code = run(
            console,
            "--config",
            str(config_file),
            "--base-path",
            str(other),
            "model",
            "User",
        )

        assert code == 0
        assert (other / "Models" / "User.php").exists()

    def test_bad_config_file(self, console, tmp_path):
        code = run(console, "--config", str(tmp_path / "absent.json"), "model", "User")

        assert code == 1
        assert "Configuration file not found" in output(console)

    def test_missing_stub_reported(self, console, config_file, tmp_path):
        data = json.loads(config_file.read_text(encoding="utf-8"))
        data["stub_path"] = str(tmp_path / "absent.stub")
        config_file.write_text(json.dumps(data), encoding="utf-8")

        code = run(console, "--config", str(config_file), "model", "User")

        assert code == 1
        assert "Failed to read stub" in output(console)

    def test_no_command(self, console, config_file):
        assert run(console, "--config", str(config_file)) == 1
