"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from stsmap.services import CoverageCounter, RankedGroup
from stsmap.services.map_validator import Issue, format_issue


def debug_enabled() -> bool:
    """Return True only when STSMAP_DEBUG is explicitly set to '1'."""
    return os.getenv("STSMAP_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_counter(counter: CoverageCounter) -> str:
    types = ", ".join(counter.room_types) or "none"
    return f"{counter.label}: {counter.count} ({counter.path_count} paths) [{types}]"


def render_summary(path_count: int, counters: Sequence[CoverageCounter]) -> None:
    render_heading("Paths")
    print(f"Number of paths: {path_count}")
    render_bullet_lines(format_counter(counter) for counter in counters)


def render_ranking(ranking: Sequence[RankedGroup]) -> None:
    """Display ranked score groups, best first."""
    render_heading("Most valuable paths")
    if not ranking:
        print("No complete paths.")
        return
    for idx, group in enumerate(ranking, start=1):
        print(f"{idx}. {group.label}: {len(group.paths)} paths")
        if debug_enabled():
            for path in group.paths:
                print("     " + " ".join(f"{floor}:{room}" for floor, room in path.items()))


def render_issues(issues: Sequence[Issue]) -> None:
    render_heading("Validation")
    if not issues:
        print("No issues found.")
        return
    render_bullet_lines(format_issue(issue) for issue in issues)
