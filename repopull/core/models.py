"""Configuration record and per-run result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_BRANCHES, KEY_BRANCHES, KEY_REPOSITORIES, KEY_ROOT_DIRECTORY
from .types import OutcomeKind


class Configuration(BaseModel):
    """The persisted settings record. All three fields always exist."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # entries are not type-checked; a non-string one fails when it is processed
    repositories: list[Any] = Field(default_factory=list, alias=KEY_REPOSITORIES)
    root_directory: str = Field(default="", alias=KEY_ROOT_DIRECTORY)
    branches: list[str] = Field(default_factory=lambda: list(DEFAULT_BRANCHES), alias=KEY_BRANCHES)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2) + "\n"


@dataclass(frozen=True)
class RepositoryOutcome:
    name: str
    kind: OutcomeKind
    branch: str | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.success


@dataclass
class RunSummary:
    """Result of one batch run; built fresh for every invocation."""

    root_directory: str
    started_at: datetime
    finished_at: datetime
    total: int = 0
    succeeded: int = 0
    failures: list[RepositoryOutcome] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def elapsed_seconds(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()
