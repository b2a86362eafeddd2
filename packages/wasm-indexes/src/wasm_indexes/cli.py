from __future__ import annotations

import argparse
import json
import sys

from . import __version__
from .context import RunContext
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL, OK
from .generator import TargetResult, generate_all
from .logging import log_event
from .manifest import build_manifest, render_manifest
from .targets import TARGETS

TOOL = "wasm-indexes"
CONFIRMATION = "WASM index manifests generated."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=TOOL, description="write index.json manifests for wasm asset directories")
    p.add_argument("--version", action="version", version=f"{TOOL} {__version__}")
    p.add_argument("--repo-root", help="repository root (default: nearest parent holding Cargo.toml and src/)")
    p.add_argument("--format", choices=["text", "json"], default="text", help="report format")
    p.add_argument("--log-json", action="store_true", help="emit structured logs as JSON on stderr")
    p.add_argument("--quiet", action="store_true", help="only log errors")
    p.add_argument("--dry-run", action="store_true", help="print manifests without writing them")
    return p


def _report_payload(ctx: RunContext, results: list[TargetResult]) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": TOOL,
        "status": "ok",
        "run_id": ctx.run_id,
        "dry_run": ctx.dry_run,
        "targets": [
            {
                "directory": row.target.directory,
                "pattern": row.target.pattern,
                "count": len(row.files),
                **({"files": list(row.files)} if ctx.dry_run else {}),
            }
            for row in results
        ],
    }


def _emit_report(ctx: RunContext, results: list[TargetResult]) -> None:
    if ctx.output_format == "json":
        print(json.dumps(_report_payload(ctx, results), sort_keys=True))
        return
    if ctx.dry_run:
        for row in results:
            print(f"# {row.manifest_path.relative_to(ctx.repo_root).as_posix()}")
            print(render_manifest(build_manifest(list(row.files))), end="")
        return
    print(CONFIRMATION)


def _emit_error(as_json: bool, message: str, code: int, kind: str) -> None:
    if as_json:
        print(
            json.dumps(
                {
                    "schema_version": 1,
                    "tool": TOOL,
                    "status": "fail",
                    "error": {"message": message, "code": code, "kind": kind},
                },
                sort_keys=True,
            ),
            file=sys.stderr,
        )
    else:
        print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    as_json = ns.format == "json"
    try:
        ctx = RunContext.from_args(ns.repo_root, ns.format, ns.log_json, ns.quiet, ns.dry_run)
        log_event(ctx, "info", "cli", "start", repo_root=str(ctx.repo_root), targets=len(TARGETS), dry_run=ctx.dry_run)
        results = generate_all(ctx, TARGETS)
        _emit_report(ctx, results)
        return OK
    except ScriptError as exc:
        _emit_error(as_json, str(exc), exc.code, exc.kind)
        return exc.code
    except Exception as exc:  # pragma: no cover
        _emit_error(as_json, f"internal error: {exc}", ERR_INTERNAL, "internal_error")
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
