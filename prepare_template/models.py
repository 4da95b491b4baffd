from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

from prepare_template.constants import (
    DEFAULT_TOKENS,
    ENV_FILENAME,
    EXCLUDED_DIRS,
    MANIFEST_BACKUP_FILENAME,
    MANIFEST_FILENAME,
    PACKAGE_FILENAME,
)


MANIFEST_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "description",
    "author",
    "authorUrl",
    "license",
    "version",
)


class ScanErrorKind(str, Enum):
    MISSING = "missing"
    IO = "io"
    UNSUPPORTED = "unsupported"


class ManifestSyncStatus(str, Enum):
    SYNCED = "synced"
    REWRITTEN = "rewritten"


def normalize_tokens(entries: Iterable[str]) -> tuple[str, ...]:
    tokens: list[str] = []
    for entry in entries:
        token = entry.strip().upper()
        if token and token not in tokens:
            tokens.append(token)
    return tuple(tokens)


@dataclass(frozen=True)
class ScannerConfig:
    root: Path
    tokens: tuple[str, ...] = DEFAULT_TOKENS
    excluded_dirs: frozenset[str] = EXCLUDED_DIRS

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", normalize_tokens(self.tokens))

    @classmethod
    def with_custom_tokens(
        cls,
        root: Path,
        custom: Optional[Iterable[str]] = None,
        excluded_dirs: frozenset[str] = EXCLUDED_DIRS,
    ) -> "ScannerConfig":
        tokens = normalize_tokens([*DEFAULT_TOKENS, *(custom or [])])
        return cls(root=root, tokens=tokens, excluded_dirs=excluded_dirs)


@dataclass(frozen=True)
class ManifestConfig:
    root: Path
    reset_defaults: bool = False

    @property
    def env_path(self) -> Path:
        return self.root / ENV_FILENAME

    @property
    def package_path(self) -> Path:
        return self.root / PACKAGE_FILENAME

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILENAME

    @property
    def backup_path(self) -> Path:
        return self.root / MANIFEST_BACKUP_FILENAME


@dataclass(frozen=True)
class SignatureMatch:
    token: str
    line: int
    path: Path


@dataclass(frozen=True)
class ScanError:
    kind: ScanErrorKind
    path: Path
    message: str


@dataclass
class ScanReport:
    matches: list[SignatureMatch] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)
    visited: list[Path] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        return {
            "files": len(self.visited),
            "matches": len(self.matches),
            "errors": len(self.errors),
        }


@dataclass
class ManifestRecord:
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    authorUrl: Optional[str] = None
    license: Optional[str] = None
    version: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        payload = {key: getattr(self, key) for key in MANIFEST_FIELDS}
        return {key: value for key, value in payload.items() if value is not None}

    def mismatched_fields(self, manifest: dict[str, Any]) -> list[str]:
        return [
            key for key in MANIFEST_FIELDS if manifest.get(key) != getattr(self, key)
        ]


@dataclass
class ManifestSyncResult:
    status: ManifestSyncStatus
    record: ManifestRecord
    mismatched: list[str] = field(default_factory=list)
    backup_path: Optional[Path] = None
    created: list[Path] = field(default_factory=list)
