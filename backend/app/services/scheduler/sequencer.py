from collections import deque

from app.services.scheduler.errors import DependencyCycleError
from app.services.scheduler.graph import DependencyGraph


def sequence(graph: DependencyGraph) -> list[str]:
    """Kahn's algorithm: emit tasks as their indegree drops to zero.

    The frontier is seeded with zero-indegree tasks in input order and released
    tasks are appended FIFO, so the result is stable for a given input. The
    graph itself is left untouched.
    """
    remaining = list(graph.indegree)
    frontier = deque(i for i, degree in enumerate(remaining) if degree == 0)
    order: list[int] = []

    while frontier:
        current = frontier.popleft()
        order.append(current)
        for succ in graph.successors[current]:
            remaining[succ] -= 1
            if remaining[succ] == 0:
                frontier.append(succ)

    if len(order) != len(graph):
        unresolved = [graph.titles[i] for i, degree in enumerate(remaining) if degree > 0]
        raise DependencyCycleError(unresolved)

    return [graph.titles[i] for i in order]
