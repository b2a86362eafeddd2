from __future__ import annotations

import errno
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .context import RunContext
from .errors import FilesystemError, ScriptError
from .fs import ensure_dir, write_text_atomic
from .logging import log_event
from .manifest import MANIFEST_NAME, build_manifest, list_matching_files, render_manifest, validate_manifest
from .targets import Target


@dataclass(frozen=True)
class TargetResult:
    target: Target
    manifest_path: Path
    files: tuple[str, ...]


def generate_index(directory: Path, pattern: str) -> list[str]:
    """Regenerate `<directory>/index.json` from the files currently in `directory`.

    The directory is created when missing. The manifest is replaced atomically, so a
    failed run leaves any previous manifest untouched.
    """
    ensure_dir(directory)
    files = list_matching_files(directory, pattern)
    payload = build_manifest(files)
    validate_manifest(payload)
    write_text_atomic(directory / MANIFEST_NAME, render_manifest(payload))
    return files


def preview_index(directory: Path, pattern: str) -> list[str]:
    if not directory.exists():
        return []
    if not directory.is_dir():
        raise FilesystemError(directory, "create", os.strerror(errno.EEXIST))
    return list_matching_files(directory, pattern)


def generate_all(ctx: RunContext, targets: Sequence[Target]) -> list[TargetResult]:
    """Process `targets` in order, stopping at the first failure."""
    results: list[TargetResult] = []
    for target in targets:
        directory = ctx.repo_root / target.directory
        try:
            if ctx.dry_run:
                files = preview_index(directory, target.pattern)
            else:
                files = generate_index(directory, target.pattern)
        except ScriptError as exc:
            log_event(
                ctx,
                "error",
                "generator",
                "fail",
                directory=target.directory,
                pattern=target.pattern,
                kind=exc.kind,
            )
            raise
        log_event(
            ctx,
            "info",
            "generator",
            "preview" if ctx.dry_run else "write",
            directory=target.directory,
            pattern=target.pattern,
            count=len(files),
        )
        results.append(TargetResult(target, directory / MANIFEST_NAME, tuple(files)))
    return results
