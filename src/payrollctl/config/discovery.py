"""Locate the payrollctl.toml that applies to this invocation.

Resolution order: ``--config`` path, then ``PAYROLLCTL_CONFIG``, then the
nearest ``payrollctl.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "payrollctl.toml"
CONFIG_ENV_VAR = "PAYROLLCTL_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    """Yield ``payrollctl.toml`` paths from *start* up to the filesystem root."""
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest payrollctl.toml at or above *start* (default: cwd).

    ``PAYROLLCTL_CONFIG`` short-circuits the walk: it names the file to
    use, and a missing file there means no config at all.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        return _existing(Path(pinned), source=CONFIG_ENV_VAR)

    base = (start or Path.cwd()).resolve()
    return next((path for path in _candidates(base) if path.is_file()), None)


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for one CLI invocation.

    An *explicit* ``--config`` path wins over discovery.  Paths that do not
    exist are logged and ignored; payrollctl always runs on defaults.
    """
    if explicit:
        return _existing(Path(explicit), source="--config")
    return find_config(start)


def _existing(path: Path, *, source: str) -> Path | None:
    if path.is_file():
        return path
    logger.warning("Config file from %s not found: %s", source, path)
    return None
