from typing import Final


DEFAULT_TOKENS: Final[tuple[str, ...]] = (
    "FALCION",
    "PATTERNU",
    "PATTERNUGIT",
)

EXCLUDED_DIRS: Final[frozenset[str]] = frozenset(
    (
        "node_modules",
        "venv",
        ".git",
        "out",
    )
)

ENV_FILENAME: Final[str] = ".env"
PACKAGE_FILENAME: Final[str] = "package.json"
MANIFEST_FILENAME: Final[str] = "manifest.json"
MANIFEST_BACKUP_FILENAME: Final[str] = "manifest-backup.json"

DEFAULT_ENV_CONTENT: Final[str] = "EXAMPLE_API_KEY="
DEFAULT_MANIFEST_CONTENT: Final[str] = "{}"

MANIFEST_INDENT: Final[int] = 4
