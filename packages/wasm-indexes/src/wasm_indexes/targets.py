from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Target:
    directory: str
    pattern: str


TARGETS: tuple[Target, ...] = (
    Target("src/structure", "*.json"),
    Target("src/entity/behaviour", "*.yaml"),
    Target("src/entity/trait", "*.yaml"),
    Target("src/entity/enemy", "*.yaml"),
    Target("src/entity/friend", "*.yaml"),
    Target("src/entity/misc", "*.yaml"),
    Target("src/particle", "*.yaml"),
)
