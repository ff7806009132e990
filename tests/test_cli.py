from promptops.builder.prompts import DISCOVERY_PROMPT
from promptops.cli import main, options_from_args

from argparse import Namespace
import orjson
import pytest
import sys

def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["promptops-cli", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code

def test_options_from_args_resolves_behavior_conflicts():
    args = Namespace(
        text="Fix the login bug on Safari",
        agent="cursor",
        length="short",
        strategy="implement",
        questions=False,
        context=None,
        skill=[],
        thinking=None,
        behavior=["minimize-changes", "be-thorough"],
        project=None
    )
    options = options_from_args(args)
    assert options.tweaks.behaviors == ["minimize-changes"]

def test_options_without_tweaks():
    args = Namespace(
        text="Fix the login bug on Safari", agent="cursor", length="short", strategy="implement",
        questions=True, context="Django 5", skill=[], thinking=None, behavior=[], project=None
    )
    options = options_from_args(args)
    assert options.tweaks is None
    assert options.ask_clarifying_questions
    assert options.project_context == "Django 5"

def test_build(monkeypatch, capsys):
    code = run_cli(monkeypatch, "build", "Fix the login bug on Safari", "--agent", "aider", "--skill", "webapp-testing")
    output = capsys.readouterr().out
    assert code == 0
    assert "=== SYSTEM ===" in output
    assert "AGENT: Aider" in output
    assert "SKILL: Web App Testing" in output
    assert "=== USER ===\nFix the login bug on Safari" in output

def test_build_with_project_defaults(monkeypatch, capsys, tmp_path):
    project = tmp_path / "project.json"
    project.write_text(orjson.dumps({
        "id": "p1",
        "user_id": "u",
        "name": "Shop",
        "context_pack": "Next.js 14 storefront with Stripe",
        "default_mode": "wizard",
        "default_agent": "v0"
    }).decode(), encoding="utf8")

    assert run_cli(monkeypatch, "build", "Fix the login bug on Safari", "--project", str(project)) == 0
    output = capsys.readouterr().out
    assert "AGENT: v0" in output
    assert "Next.js 14 storefront with Stripe" in output

    assert run_cli(monkeypatch, "build", "Fix the login bug on Safari", "--project", str(project), "--agent", "aider") == 0
    assert "AGENT: Aider" in capsys.readouterr().out

def test_build_rejects_invalid_input(monkeypatch, capsys):
    code = run_cli(monkeypatch, "build", "fix it")
    assert code == 1
    assert "Input must be at least 10 characters" in capsys.readouterr().err

def test_parse(monkeypatch, capsys, tmp_path):
    completion = tmp_path / "completion.md"
    completion.write_text("**Goal:** Fix login bug\n**Questions:**\n- Which browser?", encoding="utf8")

    assert run_cli(monkeypatch, "parse", str(completion)) == 0
    parsed = orjson.loads(capsys.readouterr().out.strip())
    assert parsed["goal"] == "Fix login bug"

    assert run_cli(monkeypatch, "parse", str(completion), "--copy") == 0
    assert capsys.readouterr().out.strip() == "**Goal:** Fix login bug"

def test_suggest(monkeypatch, capsys):
    assert run_cli(monkeypatch, "suggest", "Add a security check for authentication") == 0
    assert "Security Focus" in capsys.readouterr().out

def test_discovery(monkeypatch, capsys):
    assert run_cli(monkeypatch, "discovery") == 0
    assert capsys.readouterr().out == DISCOVERY_PROMPT + "\n"
