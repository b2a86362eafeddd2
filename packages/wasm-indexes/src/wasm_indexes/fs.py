from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .errors import FilesystemError


def _default_file_mode() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(path, "create", exc.strerror or str(exc)) from exc
    return path


def write_text_atomic(path: Path, content: str, encoding: str = "utf-8") -> Path:
    """Replace `path` with `content` so readers see either the old file or the new one."""
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as exc:
        raise FilesystemError(path, "write", f"content is not representable as {encoding}") from exc
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise FilesystemError(path, "write", exc.strerror or str(exc)) from exc
    tmp = Path(tmp_name)
    replaced = False
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp, _default_file_mode())
        os.replace(tmp, path)
        replaced = True
    except OSError as exc:
        raise FilesystemError(path, "write", exc.strerror or str(exc)) from exc
    finally:
        if not replaced:
            tmp.unlink(missing_ok=True)
    return path
