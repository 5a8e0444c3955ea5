"""Tests for the interactive menu state machine."""

import json

import pytest
from typer.testing import CliRunner

from repopull.cli.main import app
from repopull.cli.menu import MenuState, transition

runner = CliRunner()


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1", MenuState.view_list),
        ("2", MenuState.add_repo),
        ("3", MenuState.remove_repo),
        ("4", MenuState.select_branch),
        (" 5 ", MenuState.manage_branches),
        ("6", MenuState.set_root),
        ("Q", MenuState.exit),
        ("zzz", MenuState.main_menu),
    ],
)
def test_main_menu_transitions(token, expected):
    assert transition(MenuState.main_menu, token) is expected


@pytest.mark.parametrize(
    "state",
    [
        MenuState.view_list,
        MenuState.add_repo,
        MenuState.remove_repo,
        MenuState.select_branch,
        MenuState.manage_branches,
        MenuState.set_root,
    ],
)
def test_action_states_return_to_main_menu(state):
    assert transition(state, "q") is MenuState.main_menu


def test_exit_is_terminal():
    assert transition(MenuState.exit, "1") is MenuState.exit


def test_menu_session_edits_configuration(tmp_path):
    config = tmp_path / "config.json"
    keys = "\n".join(
        [
            "2", "api",        # add repository
            "2", "web",
            "3", "1",          # remove first repository
            "5", "a", "develop",  # add branch
            "5", "r", "master",   # remove branch
            "1",               # view
            "q",
        ]
    ) + "\n"

    result = runner.invoke(app, ["--config", str(config), "menu"], input=keys)

    assert result.exit_code == 0, result.output
    assert "Removed api" in result.output
    assert "Branches (priority order): main, develop" in result.output
    saved = json.loads(config.read_text(encoding="utf-8"))
    assert saved["Repositories"] == ["web"]
    assert saved["Branches"] == ["main", "develop"]


def test_menu_update_without_root_warns_and_continues(tmp_path):
    config = tmp_path / "config.json"

    result = runner.invoke(app, ["--config", str(config), "menu"], input="4\n0\nq\n")

    assert result.exit_code == 0, result.output
    assert "Cannot update: no root directory configured" in result.output


def test_menu_update_runs_batch(tmp_path):
    config = tmp_path / "config.json"
    root = tmp_path / "root"
    root.mkdir()
    config.write_text(
        json.dumps({"Repositories": ["missing"], "RootDirectory": str(root), "Branches": ["master", "main"]}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["--config", str(config), "menu"], input="4\n2\nq\n")

    assert result.exit_code == 0, result.output
    assert "[skip] missing" in result.output
    assert "Done. 0/1 succeeded, 1 failed" in result.output


def test_menu_set_root_creates_on_confirmation(tmp_path):
    config = tmp_path / "config.json"
    target = tmp_path / "work"

    result = runner.invoke(app, ["--config", str(config), "menu"], input=f"6\n{target}\ny\nq\n")

    assert result.exit_code == 0, result.output
    assert target.is_dir()
    assert json.loads(config.read_text(encoding="utf-8"))["RootDirectory"] == str(target)
