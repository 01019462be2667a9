from typing import Any


class SchedulingError(Exception):
    """Base class for request-scoped scheduling failures."""

    code = "scheduling_error"

    def to_detail(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class EmptyInputError(SchedulingError):
    code = "empty_input"

    def __init__(self):
        super().__init__("Input tasks list cannot be empty.")


class DuplicateTaskTitleError(SchedulingError):
    code = "duplicate_task_title"

    def __init__(self, title: str):
        super().__init__(f"Duplicate task title '{title}'.")
        self.title = title

    def to_detail(self) -> dict[str, Any]:
        return {**super().to_detail(), "title": self.title}


class UnknownDependencyError(SchedulingError):
    code = "unknown_dependency"

    def __init__(self, task: str, missing: str):
        super().__init__(f"Task '{task}' depends on unknown task '{missing}'.")
        self.task = task
        self.missing = missing

    def to_detail(self) -> dict[str, Any]:
        return {**super().to_detail(), "task": self.task, "missing": self.missing}


class DependencyCycleError(SchedulingError):
    """Raised when some tasks never become eligible.

    ``unresolved`` lists those tasks in input order. It includes tasks that only
    depend on a cycle transitively, not just the cycle members themselves.
    """

    code = "dependency_cycle"

    def __init__(self, unresolved: list[str] | None = None):
        super().__init__("Dependency cycle detected. Cannot generate a complete schedule.")
        self.unresolved = list(unresolved or [])

    def to_detail(self, include_unresolved: bool = False) -> dict[str, Any]:
        detail = super().to_detail()
        if include_unresolved:
            detail["unresolved"] = self.unresolved
        return detail
