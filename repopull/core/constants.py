"""Module holding constants used across repopull."""

from pathlib import Path

DEFAULT_BRANCHES = ("master", "main")
DEFAULT_CONFIG_PATH = Path.home() / ".repopull" / "config.json"
GIT_DIR_NAME = ".git"

# Persisted key names, in the order they are written.
KEY_REPOSITORIES = "Repositories"
KEY_ROOT_DIRECTORY = "RootDirectory"
KEY_BRANCHES = "Branches"

EXIT_OK = 0
EXIT_NO_ROOT = 3
EXIT_UNEXPECTED = 4
EXIT_BAD_SETTINGS = 5
