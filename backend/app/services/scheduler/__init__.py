"""Dependency-ordered task scheduling.

``schedule`` is a pure function of its input: validate the task list, build the
dependency graph, then sequence it. Failures are raised as ``SchedulingError``
subclasses and nothing is logged here; callers decide how to report them.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from app.services.scheduler.errors import (
    DependencyCycleError,
    DuplicateTaskTitleError,
    EmptyInputError,
    SchedulingError,
    UnknownDependencyError,
)
from app.services.scheduler.graph import DependencyGraph, build_graph
from app.services.scheduler.sequencer import sequence
from app.services.scheduler.validator import validate_tasks


@dataclass
class ScheduleResult:
    order: list[str]
    edge_count: int = 0


def schedule(tasks: Sequence | None, dedupe_dependencies: bool = True) -> ScheduleResult:
    """Return a dependency-respecting order for ``tasks``.

    Each task needs a ``title`` and a ``dependencies`` sequence of titles.
    """
    titles = validate_tasks(tasks)
    graph = build_graph(tasks, titles, dedupe=dedupe_dependencies)
    return ScheduleResult(order=sequence(graph), edge_count=graph.edge_count)


__all__ = [
    "DependencyCycleError",
    "DependencyGraph",
    "DuplicateTaskTitleError",
    "EmptyInputError",
    "ScheduleResult",
    "SchedulingError",
    "UnknownDependencyError",
    "build_graph",
    "schedule",
    "sequence",
    "validate_tasks",
]
