from pathlib import Path


class PrepareAppError(Exception):
    """Base user-facing application error."""


class PrepareFileError(PrepareAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(PrepareFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required file")


class InvalidJsonFormatError(PrepareFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class UnreadableFileError(PrepareFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Unable to read file ({detail})")


class InvalidConfigSchemaError(PrepareFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid file schema ({detail})")


class UnsupportedEntryError(PrepareAppError):
    """Raised for directory entries that are neither files nor directories."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Entry is neither a file nor a directory: {path}")
