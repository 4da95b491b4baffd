import json
from pathlib import Path

import pytest

from prepare_template.errors import (
    InvalidJsonFormatError,
    MissingConfigFileError,
    UnreadableFileError,
)
from prepare_template.utils import (
    backup_file,
    compact_home_path,
    compact_home_paths_in_text,
    ensure_file,
    read_json_strict,
    write_json,
)


# --- read_json_strict ---


def test_read_json_strict_valid_json(tmp_path: Path) -> None:
    path = tmp_path / "valid.json"
    path.write_text(json.dumps({"key": "value"}), encoding="utf-8")

    assert read_json_strict(path) == {"key": "value"}


def test_read_json_strict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MissingConfigFileError):
        read_json_strict(tmp_path / "missing.json")


def test_read_json_strict_empty_file_is_invalid(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    with pytest.raises(InvalidJsonFormatError):
        read_json_strict(path)


def test_read_json_strict_directory_is_unreadable(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.mkdir()

    with pytest.raises(UnreadableFileError) as excinfo:
        read_json_strict(path)

    assert str(path) in str(excinfo.value)


# --- write_json ---


def test_write_json_uses_four_space_indent(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.json"

    write_json(path, {"id": "x"})

    assert path.read_text(encoding="utf-8") == '{\n    "id": "x"\n}\n'


# --- backup_file ---


def test_backup_file_copies_to_fixed_name(tmp_path: Path) -> None:
    original = tmp_path / "manifest.json"
    original.write_text('{"key": "value"}', encoding="utf-8")
    target = tmp_path / "manifest-backup.json"
    target.write_text("previous", encoding="utf-8")

    backup_path = backup_file(original, target)

    assert backup_path == target
    assert target.read_text(encoding="utf-8") == '{"key": "value"}'
    assert original.exists()


# --- ensure_file ---


def test_ensure_file_creates_missing(tmp_path: Path) -> None:
    path = tmp_path / ".env"

    assert ensure_file(path, "A=") is True
    assert path.read_text(encoding="utf-8") == "A="


def test_ensure_file_leaves_existing_unless_overwrite(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_text("A=1", encoding="utf-8")

    assert ensure_file(path, "A=") is False
    assert path.read_text(encoding="utf-8") == "A=1"
    assert ensure_file(path, "A=", overwrite=True) is True
    assert path.read_text(encoding="utf-8") == "A="


def test_compact_home_path_for_absolute_home_path(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert compact_home_path(tmp_path / "project" / "manifest.json") == "~/project/manifest.json"


def test_compact_home_paths_in_text_rewrites_embedded_paths(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    text = f"File or directory not found: {tmp_path}/project/missing"

    assert compact_home_paths_in_text(text) == "File or directory not found: ~/project/missing"
