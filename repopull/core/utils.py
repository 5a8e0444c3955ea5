"""Lightweight helpers shared by the services."""
from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """Switch the process into ``path`` and always switch back afterwards."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield previous
    finally:
        os.chdir(previous)
