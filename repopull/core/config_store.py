"""Load, heal and persist the Configuration record."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from .constants import KEY_BRANCHES, KEY_REPOSITORIES, KEY_ROOT_DIRECTORY
from .errors import InvalidEntryError, RootDirectoryError
from .models import Configuration

logger = logging.getLogger(__name__)

FIELD_KEYS = (KEY_REPOSITORIES, KEY_ROOT_DIRECTORY, KEY_BRANCHES)


# ---------- pure list helpers ----------
def with_entry(items: Sequence[str], value: str, kind: str = "entry") -> list[str]:
    """Return ``items`` plus ``value``; empty or duplicate values are rejected."""
    value = (value or "").strip()
    if not value:
        raise InvalidEntryError(f"{kind} name cannot be empty")
    if value in items:
        raise InvalidEntryError(f"{kind} '{value}' is already in the list")
    return [*items, value]


def without_index(items: Sequence[str], index: int) -> list[str]:
    if not 0 <= index < len(items):
        raise InvalidEntryError(f"no entry at position {index + 1} (list has {len(items)})")
    return [v for i, v in enumerate(items) if i != index]


def without_entry(items: Sequence[str], value: str, kind: str = "entry") -> list[str]:
    if value not in items:
        raise InvalidEntryError(f"{kind} '{value}' is not in the list")
    return [v for v in items if v != value]


class ConfigStore:
    """Owns the on-disk record at ``path`` and its in-memory copy."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path).expanduser()
        self.config = Configuration()
        self._backup_pending = False

    # ---------- load / save ----------
    def load(self) -> Configuration:
        """Read the record, filling and persisting any missing fields.

        A missing file is created with defaults. A file that cannot be read is
        logged and an all-defaults record is returned; a field holding a value
        of the wrong shape falls back to its default on its own. Either way the
        damaged file is copied to ``<name>.bak`` before it is next overwritten.
        """
        self._backup_pending = False
        if not self.path.exists():
            logger.warning("Config %s not found; creating it with defaults", self.path)
            self.config = Configuration()
            self._write(self.config)
            return self.config

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Could not read config %s: %s; using defaults", self.path, e)
            self.config = Configuration()
            self._backup_pending = True
            return self.config

        if not isinstance(raw, dict):
            logger.warning("Config %s is not a JSON object; resetting it", self.path)
            self._backup_pending = True
            raw = {}
        present = {k: raw[k] for k in FIELD_KEYS if raw.get(k) is not None}
        missing = [k for k in FIELD_KEYS if k not in present]

        fields = {}
        for key, value in present.items():
            try:
                Configuration.model_validate({key: value})
            except ValidationError as e:
                logger.error("Config %s has an invalid %s (%s); using its default", self.path, key,
                             e.errors()[0]["msg"])
                self._backup_pending = True
                continue
            fields[key] = value

        self.config = Configuration.model_validate(fields)
        if missing:
            logger.warning("Config %s was missing %s; filled with defaults", self.path, ", ".join(missing))
            self._write(self.config)
        return self.config

    def save(
        self,
        repositories: Sequence[str] | None = None,
        root_directory: str | None = None,
        branches: Sequence[str] | None = None,
    ) -> bool:
        """Overwrite the record. ``None`` keeps the current in-memory value.

        Returns False (after logging) when the file could not be written; the
        in-memory record is left unchanged in that case.
        """
        updated = Configuration(
            repositories=list(self.config.repositories if repositories is None else repositories),
            root_directory=self.config.root_directory if root_directory is None else root_directory,
            branches=list(self.config.branches if branches is None else branches),
        )
        if not self._write(updated):
            return False
        self.config = updated
        return True

    def _write(self, config: Configuration) -> bool:
        if self._backup_pending:
            backup = self.path.with_name(self.path.name + ".bak")
            try:
                shutil.copy2(self.path, backup)
            except OSError as e:
                logger.error("Could not back up damaged config %s: %s; not overwriting it", self.path, e)
                return False
            logger.warning("Saved the previous contents of %s to %s", self.path, backup)
            self._backup_pending = False

        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(config.to_json(), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Could not write config %s: %s", self.path, e)
            with contextlib.suppress(OSError):
                tmp.unlink()
            return False
        logger.debug("Wrote config %s", self.path)
        return True

    # ---------- mutators ----------
    def add_repository(self, name: str) -> bool:
        return self.save(repositories=with_entry(self.config.repositories, name, "repository"))

    def remove_repository(self, index: int) -> bool:
        """Remove the repository at zero-based ``index``."""
        return self.save(repositories=without_index(self.config.repositories, index))

    def add_branch(self, name: str) -> bool:
        return self.save(branches=with_entry(self.config.branches, name, "branch"))

    def remove_branch(self, name: str) -> bool:
        return self.save(branches=without_entry(self.config.branches, name, "branch"))

    def set_root_directory(self, path: str, create: bool = False) -> bool:
        """Validate (or create, when asked) ``path`` and store it as the root."""
        if not path or not path.strip():
            raise RootDirectoryError("root directory cannot be empty")
        root = Path(path.strip()).expanduser().absolute()
        if root.exists() and not root.is_dir():
            raise RootDirectoryError(f"{root} exists but is not a directory")
        if not root.exists():
            if not create:
                raise RootDirectoryError(f"{root} does not exist")
            try:
                root.mkdir(parents=True)
            except OSError as e:
                raise RootDirectoryError(f"could not create {root}: {e}") from e
            logger.info("Created root directory %s", root)
        return self.save(root_directory=str(root))
