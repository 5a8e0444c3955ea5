"""Interactive menu as an explicit finite-state machine.

Only the main menu reads a choice that selects the next state; every other
state performs its action and hands control back to the main menu.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

import typer

from ..core.errors import InvalidEntryError, RootDirectoryError
from .context import CliState
from .rendering import render_config, render_outcome, render_repositories, render_summary


class MenuState(str, Enum):
    main_menu = "MainMenu"
    view_list = "ViewList"
    add_repo = "AddRepo"
    remove_repo = "RemoveRepo"
    select_branch = "SelectBranch"
    manage_branches = "ManageBranches"
    set_root = "SetRoot"
    exit = "Exit"


MAIN_MENU_CHOICES: tuple[tuple[str, str, MenuState], ...] = (
    ("1", "View configuration", MenuState.view_list),
    ("2", "Add repository", MenuState.add_repo),
    ("3", "Remove repository", MenuState.remove_repo),
    ("4", "Update repositories", MenuState.select_branch),
    ("5", "Manage branches", MenuState.manage_branches),
    ("6", "Set root directory", MenuState.set_root),
    ("q", "Exit", MenuState.exit),
)


def transition(state: MenuState, token: str) -> MenuState:
    """Next state for ``token`` entered while in ``state``."""
    if state is MenuState.exit:
        return MenuState.exit
    if state is MenuState.main_menu:
        choice = token.strip().lower()
        for key, _label, target in MAIN_MENU_CHOICES:
            if choice == key:
                return target
        return MenuState.main_menu
    return MenuState.main_menu


def _warn(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW, err=True)


class Menu:
    def __init__(self, state: CliState) -> None:
        self.cli = state
        self.store = state.store
        self._handlers: dict[MenuState, Callable[[], str]] = {
            MenuState.main_menu: self._main_menu,
            MenuState.view_list: self._view_list,
            MenuState.add_repo: self._add_repo,
            MenuState.remove_repo: self._remove_repo,
            MenuState.select_branch: self._select_branch,
            MenuState.manage_branches: self._manage_branches,
            MenuState.set_root: self._set_root,
        }

    def run(self) -> None:
        state = MenuState.main_menu
        while state is not MenuState.exit:
            token = self._handlers[state]()
            state = transition(state, token)

    # ---------- states ----------
    def _main_menu(self) -> str:
        typer.echo("")
        typer.secho("repopull", bold=True)
        for key, label, _target in MAIN_MENU_CHOICES:
            typer.echo(f"  {key}) {label}")
        return typer.prompt("Choose", default="q")

    def _view_list(self) -> str:
        render_config(self.store.config)
        return ""

    def _add_repo(self) -> str:
        name = typer.prompt("Repository folder name (blank to cancel)", default="", show_default=False)
        if not name.strip():
            return ""
        try:
            saved = self.store.add_repository(name)
        except InvalidEntryError as e:
            _warn(f"Not added: {e}")
            return ""
        if saved:
            typer.echo(f"Added {name.strip()}")
        else:
            _warn("Warning: could not save the configuration.")
        return ""

    def _remove_repo(self) -> str:
        repositories = list(self.store.config.repositories)
        render_repositories(repositories)
        if not repositories:
            return ""
        position = typer.prompt("Number to remove (0 to cancel)", type=int, default=0)
        if position == 0:
            return ""
        try:
            saved = self.store.remove_repository(position - 1)
        except InvalidEntryError as e:
            _warn(f"Not removed: {e}")
            return ""
        if saved:
            typer.echo(f"Removed {repositories[position - 1]}")
        else:
            _warn("Warning: could not save the configuration.")
        return ""

    def _select_branch(self) -> str:
        config = self.store.config
        typer.echo("  0) All branches in priority order: " + ", ".join(config.branches))
        for i, name in enumerate(config.branches, start=1):
            typer.echo(f"  {i}) Only {name}")
        choice = typer.prompt("Branch", type=int, default=0)
        if choice == 0:
            branches = list(config.branches)
        elif 0 < choice <= len(config.branches):
            branches = [config.branches[choice - 1]]
        else:
            _warn("No such branch.")
            return ""

        try:
            summary = self.cli.runner(on_outcome=render_outcome).run(
                config.root_directory, config.repositories, branches
            )
        except RootDirectoryError as e:
            _warn(f"Cannot update: {e}")
            return ""
        render_summary(summary)
        return ""

    def _manage_branches(self) -> str:
        branches = self.store.config.branches
        typer.echo("Branches (priority order): " + (", ".join(branches) or "(none)"))
        action = typer.prompt("[a]dd, [r]emove or [b]ack", default="b").strip().lower()
        try:
            if action == "a":
                name = typer.prompt("Branch to add")
                saved = self.store.add_branch(name)
            elif action == "r":
                name = typer.prompt("Branch to remove")
                saved = self.store.remove_branch(name)
            else:
                return ""
        except InvalidEntryError as e:
            _warn(f"Branches not changed: {e}")
            return ""
        if not saved:
            _warn("Warning: could not save the configuration.")
        return ""

    def _set_root(self) -> str:
        current = self.store.config.root_directory
        path = typer.prompt("Root directory", default=current or "", show_default=bool(current))
        if not path.strip():
            return ""
        create = False
        if not Path(path.strip()).expanduser().exists():
            create = typer.confirm(f"{path.strip()} does not exist. Create it?", default=False)
            if not create:
                return ""
        try:
            saved = self.store.set_root_directory(path, create=create)
        except RootDirectoryError as e:
            _warn(f"Root directory not changed: {e}")
            return ""
        if saved:
            typer.echo(f"Root directory set to {self.store.config.root_directory}")
        else:
            _warn("Warning: could not save the configuration.")
        return ""
