"""Configuration for env folder loading.

Holds the three caller-facing settings (folder, production filename and the
optional local file) together with the run mode the host reports.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

DEFAULT_FOLDER = ".env"
DEFAULT_ENV_PROD = ".env"

_PRODUCTION_VALUES = {"production", "prod", "live"}


class RunMode(str, Enum):
    LOCAL = "local"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: Optional[str]) -> "RunMode":
        """Map a host indicator such as ``APP_ENV`` to a run mode.

        Anything that is not a recognised production value is local.
        """
        if (value or "").strip().lower() in _PRODUCTION_VALUES:
            return cls.PRODUCTION
        return cls.LOCAL


@dataclass(frozen=True)
class LoadConfig:
    # The folder to reach at runtime.
    folder: str = DEFAULT_FOLDER
    # Name of the file inside ``folder`` used in production.
    env_prod_filename: str = DEFAULT_ENV_PROD
    # Path of the file used when running locally.
    env_local_path: Optional[str] = None

    def with_folder(self, folder: str) -> "LoadConfig":
        return replace(self, folder=folder)

    def with_env_prod(self, env_prod_filename: str) -> "LoadConfig":
        return replace(self, env_prod_filename=env_prod_filename)

    def with_env_local(self, env_local_path: str) -> "LoadConfig":
        return replace(self, env_local_path=env_local_path)


__all__ = ["DEFAULT_ENV_PROD", "DEFAULT_FOLDER", "LoadConfig", "RunMode"]
