"""Listing, rendering and validation of `index.json` manifests."""

from __future__ import annotations

import json
import os
from fnmatch import fnmatchcase
from pathlib import Path

from .errors import FilesystemError, ScriptError
from .exit_codes import ERR_VALIDATION

MANIFEST_NAME = "index.json"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "index-manifest.schema.json"


def list_matching_files(directory: Path, pattern: str) -> list[str]:
    """Return regular files directly in `directory` matching `pattern`, sorted byte-wise.

    Symlinks are not followed, so a link is never listed even when it points at a file.
    """
    try:
        with os.scandir(directory) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_file(follow_symlinks=False)
                and entry.name != MANIFEST_NAME
                and fnmatchcase(entry.name, pattern)
            ]
    except OSError as exc:
        raise FilesystemError(directory, "list", exc.strerror or str(exc)) from exc
    return sorted(names, key=os.fsencode)


def build_manifest(files: list[str]) -> dict[str, list[str]]:
    return {"files": list(files)}


def render_manifest(payload: dict[str, list[str]]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def load_schema() -> dict[str, object]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_manifest(payload: object) -> None:
    import jsonschema

    try:
        jsonschema.validate(payload, load_schema())
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(f"manifest validation failed at {loc}: {exc.message}", ERR_VALIDATION, kind="invalid_manifest") from exc
