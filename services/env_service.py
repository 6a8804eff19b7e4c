import logging
from pathlib import Path
from typing import Optional

from env_folder.config import LoadConfig, RunMode
from env_folder.errors import EnvFolderError
from env_folder.loader import EnvironmentSink, apply_env_file
from env_folder.resolver import check_production_folder, resolve_target

logger = logging.getLogger(__name__)


def load_env_vars(
    config: Optional[LoadConfig] = None,
    mode: RunMode = RunMode.LOCAL,
    environ: Optional[EnvironmentSink] = None,
) -> Optional[Path]:
    """Resolve and apply the env file for ``mode`` and return the env folder.

    The folder is returned only when it exists on disk. A local file that was
    set explicitly must exist; the production file is optional.
    """
    config = config or LoadConfig()
    logger.debug("Is production? %s", mode is RunMode.PRODUCTION)

    if mode is RunMode.PRODUCTION:
        check_production_folder(config.folder)

    target = resolve_target(config, mode)
    logger.info("Run mode %s, env file %s", target.mode.value, target.path)

    try:
        apply_env_file(target.path, environ, required=mode is RunMode.LOCAL)
    except EnvFolderError as exc:
        logger.error("Failed to load env vars: %s", exc)
        raise

    folder = Path(target.folder)
    return folder if folder.is_dir() else None
