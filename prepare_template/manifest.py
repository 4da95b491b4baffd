import re
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator

from prepare_template.bootstrap import ensure_workspace_files, load_environment
from prepare_template.errors import InvalidConfigSchemaError
from prepare_template.models import (
    ManifestConfig,
    ManifestRecord,
    ManifestSyncResult,
    ManifestSyncStatus,
)
from prepare_template.utils import backup_file, read_json_strict, write_json


PACKAGE_DESCRIPTOR_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "displayName": {"type": "string"},
        "description": {"type": "string"},
        "license": {"type": "string"},
        "version": {"type": "string"},
        "author": {
            "oneOf": [
                {"type": "string"},
                {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "url": {"type": "string"},
                    },
                },
            ]
        },
    },
}

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
}

# npm "person" shorthand: "Name <email> (url)", email and url optional.
_PERSON_PATTERN = re.compile(
    r"^\s*(?P<name>[^<(]*?)\s*(?:<(?P<email>[^>]*)>)?\s*(?:\((?P<url>[^)]*)\))?\s*$"
)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def parse_author(author: Any) -> tuple[Optional[str], Optional[str]]:
    if isinstance(author, dict):
        return author.get("name"), author.get("url")
    if isinstance(author, str):
        match = _PERSON_PATTERN.match(author)
        if match is None:
            return author.strip() or None, None
        return match.group("name") or None, match.group("url") or None
    return None, None


def record_from_package(package: dict[str, Any]) -> ManifestRecord:
    author_name, author_url = parse_author(package.get("author"))
    return ManifestRecord(
        id=package.get("name"),
        name=package.get("displayName"),
        description=package.get("description"),
        author=author_name,
        authorUrl=author_url,
        license=package.get("license"),
        version=package.get("version"),
    )


class ManifestSynchronizer:
    def __init__(self, config: ManifestConfig) -> None:
        self.config = config
        self._package_validator = Draft7Validator(PACKAGE_DESCRIPTOR_SCHEMA)
        self._manifest_validator = Draft7Validator(MANIFEST_SCHEMA)

    def load_package(self) -> dict[str, Any]:
        payload = read_json_strict(self.config.package_path)
        self._validate(self._package_validator, payload, self.config.package_path)
        return payload

    def load_manifest(self) -> dict[str, Any]:
        payload = read_json_strict(self.config.manifest_path)
        self._validate(self._manifest_validator, payload, self.config.manifest_path)
        return payload

    def sync(self) -> ManifestSyncResult:
        created = ensure_workspace_files(self.config)
        load_environment(self.config)

        record = record_from_package(self.load_package())
        manifest = self.load_manifest()

        mismatched = record.mismatched_fields(manifest)
        if not mismatched:
            return ManifestSyncResult(
                status=ManifestSyncStatus.SYNCED, record=record, created=created
            )

        backup_path = backup_file(self.config.manifest_path, self.config.backup_path)
        write_json(self.config.manifest_path, record.as_dict())
        return ManifestSyncResult(
            status=ManifestSyncStatus.REWRITTEN,
            record=record,
            mismatched=mismatched,
            backup_path=backup_path,
            created=created,
        )

    @staticmethod
    def _validate(validator: Draft7Validator, payload: Any, path: Path) -> None:
        error = next(iter(validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(path, format_schema_error(error))
