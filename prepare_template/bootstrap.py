from pathlib import Path

from dotenv import load_dotenv

from prepare_template.constants import (
    DEFAULT_ENV_CONTENT,
    DEFAULT_MANIFEST_CONTENT,
)
from prepare_template.models import ManifestConfig
from prepare_template.utils import ensure_file


def ensure_workspace_files(config: ManifestConfig) -> list[Path]:
    """Create ``.env`` and ``manifest.json`` with default content.

    Existing files are kept unless ``config.reset_defaults`` is set, in which
    case both are overwritten with the defaults.
    """
    defaults = (
        (config.env_path, DEFAULT_ENV_CONTENT),
        (config.manifest_path, DEFAULT_MANIFEST_CONTENT),
    )
    written: list[Path] = []
    for path, content in defaults:
        if ensure_file(path, content, overwrite=config.reset_defaults):
            written.append(path)
    return written


def load_environment(config: ManifestConfig) -> bool:
    return load_dotenv(config.env_path, encoding="utf-8", override=False)
