from pathlib import Path


class EnvFolderError(Exception):
    """Base class for failures while loading env vars."""


class EnvFileUnreadableError(EnvFolderError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot load env vars from {path}: {reason}")
        self.path = path


class MissingEnvFileError(EnvFolderError):
    def __init__(self, path: Path):
        super().__init__(f"Cannot load env vars: {path} does not exist")
        self.path = path


class UnsafeFolderError(EnvFolderError):
    def __init__(self, folder: str, reason: str):
        super().__init__(f"{reason}: {folder!r}")
        self.folder = folder
