from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .errors import ScriptError
from .exit_codes import ERR_CONFIG
from .repo_root import try_find_repo_root

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat = "text"
    log_json: bool = False
    quiet: bool = False
    dry_run: bool = False

    @classmethod
    def from_args(
        cls,
        repo_root: str | None,
        output_format: OutputFormat = "text",
        log_json: bool = False,
        quiet: bool = False,
        dry_run: bool = False,
        run_id: str | None = None,
    ) -> "RunContext":
        if repo_root:
            root = Path(repo_root).resolve()
            if not root.is_dir():
                raise ScriptError(f"repository root is not a directory: {root}", ERR_CONFIG, kind="config_error")
        else:
            found = try_find_repo_root()
            if found is None:
                raise ScriptError(
                    "unable to resolve repository root; run from inside the repository or pass --repo-root",
                    ERR_CONFIG,
                    kind="config_error",
                )
            root = found
        default_run = f"indexes-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or os.environ.get("RUN_ID", default_run),
            repo_root=root,
            output_format=output_format,
            log_json=log_json,
            quiet=quiet,
            dry_run=dry_run,
        )
