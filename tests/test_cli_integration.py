"""Integration tests for CLI entry points and main application logic."""

import json
import logging

import pytest

from modelhub.cli import parse_arguments
from modelhub.main import main


@pytest.fixture(autouse=True)
def reset_modelhub_logger():
    """main() attaches a stderr handler to the package logger; drop it after each test."""
    logger = logging.getLogger("modelhub")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def dirs(tmp_path):
    """Return the CLI flags pointing both settings scopes into tmp_path."""
    return [
        "--user-dir", str(tmp_path / "home"),
        "--workspace-dir", str(tmp_path / "project"),
    ]


def test_arg_parsing_defaults():
    args = parse_arguments([])

    assert args.command == []
    assert args.user_dir is None
    assert args.workspace_dir is None
    assert args.complete is False
    assert args.verbose is False


def test_arg_parsing_command_words(tmp_path):
    """Options come first; everything after is the command."""
    args = parse_arguments(["--user-dir", str(tmp_path), "-v", "key", "openai", "sk-a", "sk-b"])

    assert args.command == ["key", "openai", "sk-a", "sk-b"]
    assert args.user_dir == tmp_path
    assert args.verbose is True


def test_main_list_by_default(dirs, capsys):
    exit_code = main(dirs)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Available AI Models and Providers:" in captured.out
    assert captured.err == ""


def test_main_set_persists(dirs, tmp_path, capsys):
    """A successful switch is written to the user settings file."""
    assert main(dirs + ["set", "gpt", "gpt-4o"]) == 0

    assert "Switched to GPT-4o (gpt-4o) from gpt" in capsys.readouterr().out
    saved = json.loads((tmp_path / "home" / "settings.json").read_text())
    assert saved["modelRegistry"]["currentProvider"] == "openai"

    assert main(dirs + ["current"]) == 0
    assert "Current model: GPT-4o (gpt-4o) from OpenAI" in capsys.readouterr().out


def test_main_error_goes_to_stderr(dirs, tmp_path, capsys):
    exit_code = main(dirs + ["set", "openai", "not-a-model"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Invalid model: not-a-model for provider openai" in captured.err
    assert captured.out == ""
    assert not (tmp_path / "home" / "settings.json").exists()


def test_main_unknown_subcommand(dirs, capsys):
    assert main(dirs + ["remove"]) == 1
    assert "Unknown subcommand: remove" in capsys.readouterr().err


def test_main_workspace_settings_override_user(dirs, tmp_path, capsys):
    workspace_file = tmp_path / "project" / ".modelhub" / "settings.json"
    workspace_file.parent.mkdir(parents=True)
    workspace_file.write_text(json.dumps({
        "modelRegistry": {"currentProvider": "anthropic", "currentModel": "claude-3-opus-20240229"}
    }))

    assert main(dirs + ["current"]) == 0
    assert "Claude 3 Opus (claude-3-opus-20240229) from Anthropic Claude" in capsys.readouterr().out


def test_main_complete(dirs, capsys):
    """--complete prints one candidate per line."""
    assert main(dirs + ["--complete", "set", "openai", "gpt-4o"]) == 0

    assert capsys.readouterr().out.splitlines() == ["gpt-4o", "gpt-4o-mini"]


def test_main_complete_subcommands(dirs, capsys):
    assert main(dirs + ["--complete", "c"]) == 0
    assert capsys.readouterr().out.splitlines() == ["current"]
