import random

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.schedule import ScheduleTaskInput


def make_tasks(layout: dict[str, list[str]]) -> list[ScheduleTaskInput]:
    """Build task inputs from ``{title: [dependency, ...]}`` preserving key order."""
    return [ScheduleTaskInput(title=title, dependencies=deps) for title, deps in layout.items()]


def random_dag(seed: int, size: int = 30, density: float = 0.2) -> dict[str, list[str]]:
    """Random acyclic layout: edges only point from earlier to later titles, then shuffled."""
    rng = random.Random(seed)
    titles = [f"task-{i}" for i in range(size)]
    layout = {
        title: [titles[j] for j in range(i) if rng.random() < density]
        for i, title in enumerate(titles)
    }
    items = list(layout.items())
    rng.shuffle(items)
    return dict(items)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
