"""Read a ``KEY=VALUE`` env file and apply it to an environment mapping.

Each line is checked by python-dotenv on its own, with interpolation turned
off. Lines without ``=``, with an invalid key, with an unbalanced quote or
with a NUL byte are skipped with a warning instead of failing the whole load.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional, Tuple, Union

from dotenv import dotenv_values

from env_folder.errors import EnvFileUnreadableError, MissingEnvFileError

logger = logging.getLogger(__name__)

# Anything that takes environment writes; os.environ in production, a dict in tests.
EnvironmentSink = MutableMapping[str, str]


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for one line, or None when it is malformed.

    python-dotenv validates the binding and supplies the key. The value is the
    raw text after the first ``=``, trimmed and unquoted, without escape
    decoding or inline comment removal.
    """
    parsed = dotenv_values(stream=io.StringIO(line), interpolate=False)
    if len(parsed) != 1:
        return None
    key, value = next(iter(parsed.items()))
    if not key or value is None:
        return None
    value = _strip_quotes(line.split("=", 1)[1].strip())
    if "\x00" in key or "\x00" in value:
        return None
    return key, value


def read_env_entries(path: Union[str, Path]) -> Dict[str, str]:
    """Parse ``path`` and return its entries, last occurrence winning.

    Every line is parsed on its own, so a malformed line never swallows the
    lines after it.
    """
    path = Path(path)
    try:
        # utf-8-sig drops a leading BOM so the first key comes out clean
        with open(path, "r", encoding="utf-8-sig") as handle:
            lines = handle.read().split("\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileUnreadableError(path, str(exc)) from exc

    entries: Dict[str, str] = {}
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entry = _parse_line(stripped)
        if entry is None:
            logger.warning("Skipping malformed line %s in %s", lineno, path)
            continue
        key, value = entry
        entries[key] = value
    return entries


def apply_env_file(
    path: Optional[Union[str, Path]],
    environ: Optional[EnvironmentSink] = None,
    *,
    required: bool = False,
    override: bool = True,
) -> int:
    """Load ``path`` into ``environ`` and return how many keys were written.

    ``None`` means there is nothing to load. A path that does not exist is
    skipped unless ``required`` is set, in which case it raises
    :class:`MissingEnvFileError`. With ``override`` off, keys already present
    in ``environ`` keep their current value.
    """
    if environ is None:
        environ = os.environ

    if path is None:
        logger.info("No env file configured; nothing to load")
        return 0

    path = Path(path)
    if not path.exists():
        if required:
            raise MissingEnvFileError(path)
        logger.warning("Env file %s not found; skipping", path)
        return 0

    logger.info("Loading env vars from file %s", path)
    applied = 0
    for key, value in read_env_entries(path).items():
        if not override and key in environ:
            logger.debug("Keeping existing value for %s", key)
            continue
        environ[key] = value
        applied += 1

    logger.info("Applied %s env vars from %s", applied, path)
    return applied


__all__ = ["EnvironmentSink", "apply_env_file", "read_env_entries"]
