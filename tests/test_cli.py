from __future__ import annotations

import argparse
import io
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

import opsboot.cli as cli
from opsboot.cli import build_loadkey_parser, build_scaffold_parser, loadkey_main, scaffold_main
from opsboot.cli.commands.loadkey import settings_from_args as agent_settings_from_args
from opsboot.cli.commands.scaffold import format_next_steps, run_scaffold_command
from opsboot.cli.commands.scaffold import settings_from_args as scaffold_settings_from_args
from opsboot.cli.reporting.rich import RichReporter
from opsboot.core.contracts.agent import AgentSettings
from opsboot.core.contracts.exceptions import PrerequisiteError, TemplateValidationError
from opsboot.core.contracts.scaffold import SENTINEL_NAME, ScaffoldSettings
from tests.fakes.reporter import RecordingReporter


def _scaffold_args(root: Path, **overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "root": str(root),
        "templates_dir": None,
        "project_name": None,
        "verbose": False,
        "create_templates": False,
        "copy_templates": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def _buffered_reporter() -> tuple[RichReporter, io.StringIO]:
    buffer = io.StringIO()
    return RichReporter(Console(file=buffer, force_terminal=False, width=200)), buffer


# ---------------------------------------------------------------------------
# parsers
# ---------------------------------------------------------------------------


class TestScaffoldParser:
    def test_short_and_long_flags(self) -> None:
        args = build_scaffold_parser().parse_args(["-v", "-c"])
        assert args.verbose is True
        assert args.copy_templates is True
        assert args.create_templates is False

        args = build_scaffold_parser().parse_args(["--create-templates"])
        assert args.create_templates is True

    def test_defaults(self) -> None:
        args = build_scaffold_parser().parse_args([])
        assert args.root == "."
        assert args.templates_dir is None
        assert args.project_name is None

    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            scaffold_main(["--help"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--copy-templates" in out
        assert "Existing files are never overwritten" in out
        assert "create-ansible-structure --copy-templates" in out

    def test_unknown_flag_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert scaffold_main(["--bogus"]) == 1

        err = capsys.readouterr().err
        assert "--bogus" in err
        assert "usage:" in err


class TestLoadkeyParser:
    def test_key_flag(self) -> None:
        args, ignored = build_loadkey_parser().parse_known_args(["-k", "~/.ssh/id_rsa"])
        assert args.key == "~/.ssh/id_rsa"
        assert ignored == []

    def test_key_without_value(self) -> None:
        args, _ = build_loadkey_parser().parse_known_args(["-k"])
        assert args.key is None

    def test_unknown_flags_are_ignored(self) -> None:
        args, ignored = build_loadkey_parser().parse_known_args(["-x", "-k", "/keys/id"])
        assert args.key == "/keys/id"
        assert ignored == ["-x"]


# ---------------------------------------------------------------------------
# settings
# ---------------------------------------------------------------------------


def test_scaffold_settings_from_args(tmp_path: Path) -> None:
    settings = scaffold_settings_from_args(
        _scaffold_args(tmp_path, copy_templates=True, templates_dir=str(tmp_path / "tpl"), project_name="demo")
    )

    assert settings.project_root == tmp_path.resolve()
    assert settings.templates_dir == (tmp_path / "tpl").resolve()
    assert settings.project_name == "demo"
    assert settings.copy_templates is True


def test_agent_settings_from_args(tmp_path: Path) -> None:
    args = argparse.Namespace(key=str(tmp_path / "id"), env_file=str(tmp_path / "env"), verbose=True)

    settings = agent_settings_from_args(args)

    assert settings.key == tmp_path / "id"
    assert settings.env_file == tmp_path / "env"
    assert "verbose" not in AgentSettings.model_fields


def test_agent_settings_from_args_without_key() -> None:
    args = argparse.Namespace(key=None, env_file=None, verbose=False)

    settings = agent_settings_from_args(args)

    assert settings.key is None
    assert settings.env_file.name == "environment"


# ---------------------------------------------------------------------------
# scaffold command
# ---------------------------------------------------------------------------


class TestScaffoldCommand:
    def test_structure_only_run(self, project_root: Path) -> None:
        reporter, buffer = _buffered_reporter()

        assert run_scaffold_command(_scaffold_args(project_root), reporter=reporter) == 0

        assert (project_root / "vault" / SENTINEL_NAME).is_file()
        output = buffer.getvalue()
        assert "=== Project structure created successfully! ===" in output
        assert "Project name: demo" in output
        assert "Run again with --copy-templates" in output

    def test_copy_run_prints_galaxy_step(self, project_root: Path, templates_dir: Path) -> None:
        reporter, buffer = _buffered_reporter()

        assert run_scaffold_command(_scaffold_args(project_root, copy_templates=True), reporter=reporter) == 0

        assert (project_root / "site.yml").is_file()
        assert "ansible-galaxy install -r requirements.yml" in buffer.getvalue()

    def test_create_templates_stops_early(self, project_root: Path) -> None:
        reporter, buffer = _buffered_reporter()

        assert run_scaffold_command(_scaffold_args(project_root, create_templates=True), reporter=reporter) == 0

        assert (project_root / "scripts" / "templates" / "site.yml.tpl").is_file()
        assert not (project_root / "playbooks").exists()
        assert "created successfully! ===" not in buffer.getvalue()

    def test_accepts_any_reporter(self, project_root: Path, reporter: RecordingReporter) -> None:
        assert run_scaffold_command(_scaffold_args(project_root), reporter=reporter) == 0

        assert f"  1. cd {project_root.resolve()}" in reporter.messages("plain")
        assert ("blank", "") in reporter.events
        assert reporter.messages("success")[-1] == "Happy automating with Ansible!"

    def test_format_next_steps_depends_on_copy_mode(self, tmp_path: Path) -> None:
        copy_steps = format_next_steps(ScaffoldSettings(project_root=tmp_path, copy_templates=True))
        plain_steps = format_next_steps(ScaffoldSettings(project_root=tmp_path))

        assert len(copy_steps) == 5
        assert len(plain_steps) == 4
        assert copy_steps[0] == plain_steps[0] == f"  1. cd {tmp_path.resolve()}"


# ---------------------------------------------------------------------------
# main() error mapping
# ---------------------------------------------------------------------------


class TestScaffoldMain:
    def test_success_returns_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run = MagicMock(return_value=0)
        monkeypatch.setattr(cli, "_run_scaffold", run)

        assert scaffold_main(["-c"]) == 0
        assert run.call_args.args[0].copy_templates is True

    def test_validation_error_returns_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(
            cli, "_run_scaffold", MagicMock(side_effect=TemplateValidationError(missing=["site.yml.tpl"]))
        )

        assert scaffold_main(["-c"]) == 1
        err = capsys.readouterr().err
        assert "error: Missing template files:" in err
        assert "site.yml.tpl" in err

    def test_missing_template_end_to_end(self, project_root: Path, templates_dir: Path) -> None:
        (templates_dir / "ansible.cfg.tpl").unlink()

        assert scaffold_main(["-c", "--root", str(project_root)]) == 1
        assert not (project_root / "ansible.cfg").exists()
        assert not (project_root / "playbooks").exists()

    def test_unexpected_os_error_returns_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli, "_run_scaffold", MagicMock(side_effect=PermissionError("read-only root")))

        assert scaffold_main(["-c"]) == 1
        assert "error: read-only root" in capsys.readouterr().err

    def test_latin1_template_end_to_end(self, project_root: Path, templates_dir: Path) -> None:
        (templates_dir / "README.md.tpl").write_bytes(b"# PROJECT_NAME caf\xe9\n")

        assert scaffold_main(["-c", "--root", str(project_root)]) == 0
        assert (project_root / "README.md").read_bytes() == b"# demo caf\xe9\n"
        assert (project_root / "roles" / "sample-role" / "tests" / "test.yml").is_file()

    def test_verbose_enables_debug_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(cli, "_run_scaffold", MagicMock(return_value=0))
        basic_config = MagicMock()
        monkeypatch.setattr(cli.logging, "basicConfig", basic_config)

        scaffold_main(["--verbose"])

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG


class TestLoadkeyMain:
    def test_dispatches_with_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run = MagicMock(return_value=0)
        monkeypatch.setattr(cli, "_run_loadkey", run)

        assert loadkey_main(["-k", "/keys/id", "-z"]) == 0
        assert run.call_args.args[0].key == "/keys/id"

    def test_missing_prerequisite_returns_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli, "_run_loadkey", MagicMock(side_effect=PrerequisiteError("ssh-agent")))

        assert loadkey_main([]) == 1
        assert "Required command 'ssh-agent' not found" in capsys.readouterr().err

    def test_unexpected_error_returns_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli, "_run_loadkey", MagicMock(side_effect=PermissionError("environment locked")))

        assert loadkey_main([]) == 1
        assert "error: environment locked" in capsys.readouterr().err

    def test_run_loadkey_builds_loader(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        loader_cls = MagicMock()
        monkeypatch.setattr(cli, "AgentLoader", loader_cls)

        assert loadkey_main(["-k", str(tmp_path / "id"), "--env-file", str(tmp_path / "env")]) == 0

        settings = loader_cls.call_args.args[0]
        assert settings.key == tmp_path / "id"
        assert settings.env_file == tmp_path / "env"
        loader_cls.return_value.run.assert_called_once_with()
