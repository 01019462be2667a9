from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class DependencyGraph:
    """Successor lists and indegree counters indexed by task position.

    ``index`` maps each title to its slot in the parallel ``successors`` and
    ``indegree`` arrays; ``titles`` is the reverse mapping.
    """

    titles: list[str]
    index: dict[str, int]
    successors: list[list[int]] = field(default_factory=list)
    indegree: list[int] = field(default_factory=list)
    edge_count: int = 0

    def __len__(self) -> int:
        return len(self.titles)

    def successor_titles(self, title: str) -> list[str]:
        return [self.titles[i] for i in self.successors[self.index[title]]]

    def indegree_of(self, title: str) -> int:
        return self.indegree[self.index[title]]


def build_graph(tasks: Sequence, titles: list[str], dedupe: bool = True) -> DependencyGraph:
    """Invert each task's dependency list into predecessor -> successor edges.

    Expects input that already passed ``validate_tasks``. With ``dedupe`` off a
    dependency listed twice by one task becomes two parallel edges; both land in
    the successor list as well as the indegree, so they are released together.
    """
    index = {title: i for i, title in enumerate(titles)}
    graph = DependencyGraph(
        titles=list(titles),
        index=index,
        successors=[[] for _ in titles],
        indegree=[0] * len(titles),
    )

    for task in tasks:
        target = index[task.title]
        deps = dict.fromkeys(task.dependencies) if dedupe else task.dependencies
        for dep in deps:
            graph.successors[index[dep]].append(target)
            graph.indegree[target] += 1
            graph.edge_count += 1

    return graph
