import json
import shutil
from pathlib import Path
from typing import Any

from prepare_template.constants import MANIFEST_INDENT
from prepare_template.errors import (
    InvalidJsonFormatError,
    MissingConfigFileError,
    UnreadableFileError,
)


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_strict(path: Path) -> Any:
    if not path.exists():
        raise MissingConfigFileError(path)
    try:
        return read_json(path)
    except ValueError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc
    except OSError as exc:
        raise UnreadableFileError(path, str(exc)) from exc


def write_json(path: Path, payload: Any, indent: int = MANIFEST_INDENT) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, sort_keys=False)
        handle.write("\n")


def backup_file(path: Path, backup_path: Path) -> Path:
    shutil.copyfile(path, backup_path)
    return backup_path


def ensure_file(path: Path, default: str, overwrite: bool = False) -> bool:
    """Write ``default`` to ``path`` when it is missing (or always, with ``overwrite``).

    Returns True when the file was written.
    """
    if path.exists() and not overwrite:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(default, encoding="utf-8")
    return True


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
