"""Generate `index.json` asset manifests for WebAssembly builds."""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "context",
    "errors",
    "exit_codes",
    "fs",
    "generator",
    "logging",
    "manifest",
    "repo_root",
    "targets",
]
