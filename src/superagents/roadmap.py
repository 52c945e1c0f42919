"""ROADMAP.md parsing and progress tracking.

Expects ``## Phase N: Name`` headers followed by ``- [x]`` / ``- [ ]`` task
lines. Tasks before the first phase header are ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_PHASE_HEADER = re.compile(r"^## Phase (\d+):\s*(.+)")
_TASK_LINE = re.compile(r"^- \[([ xX])\]\s+(.+)")


@dataclass
class RoadmapTask:
    title: str
    done: bool


@dataclass
class RoadmapPhase:
    number: int
    name: str
    tasks: list[RoadmapTask] = field(default_factory=list)

    @property
    def done_count(self) -> int:
        return sum(1 for task in self.tasks if task.done)

    @property
    def total(self) -> int:
        return len(self.tasks)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.done_count == self.total


@dataclass
class RoadmapProgress:
    phases: list[RoadmapPhase]
    done: int
    total: int

    @property
    def percent(self) -> int:
        return round(100 * self.done / self.total) if self.total else 0

    @property
    def current_phase(self) -> RoadmapPhase | None:
        """First phase with unfinished tasks."""
        for phase in self.phases:
            if not phase.is_complete and phase.total:
                return phase
        return None


def parse_roadmap(content: str) -> list[RoadmapPhase]:
    """Parse roadmap markdown into phases and tasks."""
    phases: list[RoadmapPhase] = []
    current: RoadmapPhase | None = None

    for line in content.splitlines():
        if match := _PHASE_HEADER.match(line):
            current = RoadmapPhase(number=int(match.group(1)), name=match.group(2).strip())
            phases.append(current)
            continue

        if (match := _TASK_LINE.match(line)) and current is not None:
            current.tasks.append(
                RoadmapTask(title=match.group(2).strip(), done=match.group(1).lower() == "x")
            )

    return phases


def summarize_progress(phases: list[RoadmapPhase]) -> RoadmapProgress:
    return RoadmapProgress(
        phases=phases,
        done=sum(phase.done_count for phase in phases),
        total=sum(phase.total for phase in phases),
    )
