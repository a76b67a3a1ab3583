"""Integration tests for the small-go CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import click
import pytest
from typer.testing import CliRunner

import smallgo
from smallgo.cli import app
from smallgo.cli.templates import list_templates

runner = CliRunner()


def _normalized(output: str) -> str:
    return " ".join(click.unstyle(output).split())


class TestNewCommand:
    """Tests for the `new` command with non-interactive flags."""

    @pytest.mark.parametrize("template", [t.name for t in list_templates()])
    def test_every_template(self, tmp_path: Path, template: str) -> None:
        project = tmp_path / f"proj-{template}"

        result = runner.invoke(app, ["new", str(project), "--template", template, "--no-go"])

        assert result.exit_code == 0, result.output
        assert (project / "cmd/server/main.go").is_file()
        assert (project / "README.md").is_file()
        assert f'"proj-{template}/' in (project / "cmd/server/main.go").read_text()

    def test_lists_created_files(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["new", str(project_dir), "-t", "hexagonal", "--no-go"])

        assert result.exit_code == 0, result.output
        assert "cmd/server/main.go" in result.output
        assert "initiators/persistence.go" in result.output
        assert "Done!" in result.output

    def test_existing_directory_fails(self, project_dir: Path) -> None:
        project_dir.mkdir()
        (project_dir / "main.go").write_text("package main\n")

        result = runner.invoke(app, ["new", str(project_dir), "-t", "clean", "--no-go"])

        assert result.exit_code == 1
        assert "already exists" in _normalized(result.output)
        assert [p.name for p in project_dir.iterdir()] == ["main.go"]

    def test_overlong_name_reports_filesystem_error(self, tmp_path: Path) -> None:
        project = tmp_path / ("x" * 300)

        result = runner.invoke(app, ["new", str(project), "-t", "clean", "--no-go"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        output = _normalized(result.output)
        assert "Error:" in output
        assert "File name too long" in output

    def test_empty_existing_directory_is_reused(self, project_dir: Path) -> None:
        project_dir.mkdir()

        result = runner.invoke(app, ["new", str(project_dir), "-t", "clean", "--no-go"])

        assert result.exit_code == 0, result.output
        assert (project_dir / "initiator/config.go").is_file()

    def test_invalid_template_exit_code_is_2(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["new", str(project_dir), "--template", "nonexistent"])

        assert result.exit_code == 2
        assert "nonexistent" in result.output
        for t in list_templates():
            assert t.name in result.output
        assert not project_dir.exists()

    def test_interactive_selection(self, project_dir: Path) -> None:
        with patch("smallgo.cli._prompts.TerminalMenu") as mock_menu_cls:
            mock_menu_cls.return_value.show.return_value = 1
            result = runner.invoke(app, ["new", str(project_dir), "--no-go"])

        assert result.exit_code == 0, result.output
        assert (project_dir / "platform/mongo/connection.go").is_file()

    def test_interactive_cancel(self, project_dir: Path) -> None:
        with patch("smallgo.cli._prompts.TerminalMenu") as mock_menu_cls:
            mock_menu_cls.return_value.show.return_value = None
            result = runner.invoke(app, ["new", str(project_dir), "--no-go"])

        assert result.exit_code == 1
        assert not project_dir.exists()

    @patch("smallgo.cli._toolchain.subprocess.run")
    def test_runs_go_toolchain(self, mock_run: MagicMock, project_dir: Path) -> None:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")

        result = runner.invoke(
            app, ["new", str(project_dir), "-t", "hexagonal", "--go-bin", "go1.22"]
        )

        assert result.exit_code == 0, result.output
        commands = [c.args[0] for c in mock_run.call_args_list]
        assert commands[0] == ["go1.22", "mod", "init", "demo"]
        assert commands[-1] == ["go1.22", "mod", "tidy"]
        assert all(c.kwargs["cwd"] == project_dir for c in mock_run.call_args_list)

    @patch("smallgo.cli._toolchain.subprocess.run")
    def test_go_bin_from_environment(self, mock_run: MagicMock, project_dir: Path) -> None:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")

        result = runner.invoke(
            app,
            ["new", str(project_dir), "-t", "clean"],
            env={"SMALL_GO_GO_BIN": "/usr/local/go/bin/go"},
        )

        assert result.exit_code == 0, result.output
        assert mock_run.call_args_list[0].args[0][0] == "/usr/local/go/bin/go"

    @patch("smallgo.cli._toolchain.subprocess.run")
    def test_toolchain_failure(self, mock_run: MagicMock, project_dir: Path) -> None:
        mock_run.return_value = MagicMock(returncode=1, stdout="", stderr="go: cannot find main module")

        result = runner.invoke(app, ["new", str(project_dir), "-t", "hexagonal"])

        assert result.exit_code == 1
        output = _normalized(result.output)
        assert "dir-created" in output
        assert "cannot find main module" in output
        assert not (project_dir / "cmd").exists()

    def test_invalid_timeout(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["new", str(project_dir), "-t", "clean", "--timeout", "0"])

        assert result.exit_code == 2
        assert "timeout" in result.output
        assert not project_dir.exists()


class TestListTemplates:
    def test_list_command(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        output = _normalized(result.output)
        for i, t in enumerate(list_templates(), start=1):
            assert f"{i}. {t.name}: {' '.join(t.description.split())}" in output

    def test_list_command_preserves_order(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.output.index("hexagonal") < result.output.index("clean")

    def test_list_templates_flag_does_not_create_directory(self, tmp_path: Path) -> None:
        name = tmp_path / "should-not-exist"

        result = runner.invoke(app, ["new", str(name), "--list-templates"])

        assert result.exit_code == 0
        assert not name.exists()

    def test_list_templates_shorthand(self) -> None:
        result = runner.invoke(app, ["new", "-l"])
        assert result.exit_code == 0

    def test_help_mentions_list_templates(self) -> None:
        result = runner.invoke(app, ["new", "--help"])

        assert "--list-templates" in click.unstyle(result.output)
        assert result.exit_code == 0


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert smallgo.__version__ in result.output
