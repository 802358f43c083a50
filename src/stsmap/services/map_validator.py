"""Static map graph validation utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from stsmap.core.types import ROOM_TYPES
from stsmap.domain.defs import MapDef


Severity = str


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str] = field(default_factory=dict)


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def validate_map(map_def: MapDef, *, known_room_types: Iterable[str] = ROOM_TYPES) -> list[Issue]:
    """Report broken references and suspicious structure in ``map_def``.

    ERROR issues make path enumeration fail; WARN issues only mean some rooms
    never appear on a complete path.
    """
    issues: list[Issue] = []
    known = set(known_room_types)
    for floor in map_def.floor_nums():
        is_top = floor == map_def.top_floor
        next_count = 0 if is_top else len(map_def.rooms(floor + 1))
        for index, room in enumerate(map_def.rooms(floor)):
            context = {"floor": str(floor), "room": str(index)}
            if room.typ not in known:
                issues.append(
                    Issue(
                        severity="WARN",
                        code="UNKNOWN_ROOM_TYPE",
                        message=f"Room type '{room.typ}' is not a known room type.",
                        context=context,
                    )
                )
            if is_top:
                if room.connections:
                    issues.append(
                        Issue(
                            severity="WARN",
                            code="TERMINAL_CONNECTIONS",
                            message="Room on the top floor has connections; they are ignored.",
                            context=context,
                        )
                    )
                continue
            if not room.connections:
                issues.append(
                    Issue(
                        severity="WARN",
                        code="DEAD_END",
                        message="Room below the top floor has no connections.",
                        context=context,
                    )
                )
            _validate_connections(floor, index, room.connections, next_count, issues)
    _validate_reachability(map_def, issues)
    return issues


def _validate_connections(
    floor: int,
    index: int,
    connections: tuple[int, ...],
    next_count: int,
    issues: list[Issue],
) -> None:
    seen: set[int] = set()
    for position, target in enumerate(connections):
        context = {
            "floor": str(floor),
            "room": str(index),
            "field_path": f"connections[{position}]",
            "referenced_room": str(target),
        }
        if not 0 <= target < next_count:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="BAD_CONNECTION",
                    message=f"Connection references a missing room on floor {floor + 1}.",
                    context=context,
                )
            )
        if target in seen:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="DUPLICATE_CONNECTION",
                    message="Connection is listed more than once.",
                    context=context,
                )
            )
        seen.add(target)


def _validate_reachability(map_def: MapDef, issues: list[Issue]) -> None:
    for floor in map_def.floor_nums():
        if floor == 1:
            continue
        targets = {
            target for room in map_def.rooms(floor - 1) for target in room.connections
        }
        for index in range(len(map_def.rooms(floor))):
            if index in targets:
                continue
            issues.append(
                Issue(
                    severity="WARN",
                    code="UNREACHABLE_ROOM",
                    message="Room has no connection from the floor below.",
                    context={"floor": str(floor), "room": str(index)},
                )
            )
