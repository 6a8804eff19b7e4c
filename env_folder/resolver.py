"""Pick the env file to load for a run mode."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional

from env_folder.config import LoadConfig, RunMode
from env_folder.errors import UnsafeFolderError


@dataclass(frozen=True)
class ResolvedTarget:
    mode: RunMode
    folder: str
    # None when there is nothing to load
    path: Optional[Path] = None


def resolve_target(config: LoadConfig, mode: RunMode) -> ResolvedTarget:
    """Return the file that should be loaded for ``mode``.

    Local mode uses ``env_local_path`` verbatim and ignores the folder;
    production joins ``folder`` and ``env_prod_filename``. Existence is not
    checked here.
    """
    if mode is RunMode.PRODUCTION:
        path: Optional[Path] = Path(config.folder) / config.env_prod_filename
    elif config.env_local_path:
        path = Path(config.env_local_path)
    else:
        path = None
    return ResolvedTarget(mode=mode, folder=config.folder, path=path)


def check_production_folder(folder: str) -> None:
    """Reject production folders that would reach outside the project."""
    if PurePath(folder).is_absolute():
        raise UnsafeFolderError(folder, "Cannot use an absolute path for an env folder")
    normalized = os.path.normpath(folder)
    if normalized == os.pardir or normalized.startswith(os.pardir + os.sep):
        raise UnsafeFolderError(folder, "Cannot traverse out of the project for an env folder")


__all__ = ["ResolvedTarget", "check_production_folder", "resolve_target"]
