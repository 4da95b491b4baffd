from pathlib import Path

from prepare_template.constants import DEFAULT_TOKENS, EXCLUDED_DIRS
from prepare_template.models import (
    ManifestConfig,
    ManifestRecord,
    ScannerConfig,
    normalize_tokens,
)


def test_normalize_tokens_strips_uppercases_and_dedupes() -> None:
    assert normalize_tokens([" foo", "BAR ", "", "Foo", "  "]) == ("FOO", "BAR")


def test_custom_tokens_are_appended_after_defaults(tmp_path: Path) -> None:
    config = ScannerConfig.with_custom_tokens(tmp_path, ["secret", "other"])

    assert config.tokens == (*DEFAULT_TOKENS, "SECRET", "OTHER")
    assert config.excluded_dirs == EXCLUDED_DIRS


def test_no_custom_tokens_keeps_defaults(tmp_path: Path) -> None:
    assert ScannerConfig.with_custom_tokens(tmp_path, None).tokens == DEFAULT_TOKENS
    assert ScannerConfig.with_custom_tokens(tmp_path, []).tokens == DEFAULT_TOKENS


def test_custom_token_no_is_a_regular_value(tmp_path: Path) -> None:
    config = ScannerConfig.with_custom_tokens(tmp_path, ["NO"])

    assert config.tokens[-1] == "NO"


def test_manifest_config_paths_share_root(tmp_path: Path) -> None:
    config = ManifestConfig(root=tmp_path)

    assert config.env_path == tmp_path / ".env"
    assert config.package_path == tmp_path / "package.json"
    assert config.manifest_path == tmp_path / "manifest.json"
    assert config.backup_path == tmp_path / "manifest-backup.json"


def test_mismatched_fields_treats_missing_as_none() -> None:
    record = ManifestRecord(id="x", version="1.0.0")

    assert record.mismatched_fields({"id": "x", "version": "1.0.0"}) == []
    assert record.mismatched_fields({"id": "x"}) == ["version"]
    assert record.mismatched_fields({"id": "x", "version": "1.0.0", "license": "MIT"}) == [
        "license"
    ]
