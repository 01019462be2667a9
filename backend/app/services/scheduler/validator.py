from collections.abc import Sequence

from app.services.scheduler.errors import (
    DuplicateTaskTitleError,
    EmptyInputError,
    UnknownDependencyError,
)


def validate_tasks(tasks: Sequence | None) -> list[str]:
    """Check a raw task list and return its titles in input order.

    Fails on the first problem found: empty input, then a repeated title, then
    the first unknown dependency in task/dependency encounter order.
    """
    if not tasks:
        raise EmptyInputError()

    titles: list[str] = []
    seen: set[str] = set()
    for task in tasks:
        if task.title in seen:
            raise DuplicateTaskTitleError(task.title)
        seen.add(task.title)
        titles.append(task.title)

    for task in tasks:
        for dep in task.dependencies:
            if dep not in seen:
                raise UnknownDependencyError(task.title, dep)

    return titles
