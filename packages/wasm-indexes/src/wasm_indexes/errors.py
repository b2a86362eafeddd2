from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exit_codes import ERR_FILESYSTEM


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class FilesystemError(ScriptError):
    """Directory creation, listing or manifest write failed for one path."""

    def __init__(self, path: Path, operation: str, reason: str) -> None:
        super().__init__(f"{operation} failed for {path}: {reason}", ERR_FILESYSTEM, kind="filesystem_error")
        self.path = path
        self.operation = operation
