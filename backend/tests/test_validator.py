import pytest

from app.services.scheduler import (
    DuplicateTaskTitleError,
    EmptyInputError,
    UnknownDependencyError,
    validate_tasks,
)
from conftest import make_tasks


@pytest.mark.parametrize("tasks", [None, []])
def test_empty_or_missing_input_rejected(tasks):
    with pytest.raises(EmptyInputError) as exc_info:
        validate_tasks(tasks)
    assert str(exc_info.value) == "Input tasks list cannot be empty."
    assert exc_info.value.to_detail() == {
        "error": "empty_input",
        "message": "Input tasks list cannot be empty.",
    }


def test_returns_titles_in_input_order():
    tasks = make_tasks({"C": [], "A": ["C"], "B": ["A", "C"]})
    assert validate_tasks(tasks) == ["C", "A", "B"]


def test_unknown_dependency_names_task_and_reference():
    tasks = make_tasks({"A": [], "B": ["Z"]})
    with pytest.raises(UnknownDependencyError) as exc_info:
        validate_tasks(tasks)
    err = exc_info.value
    assert (err.task, err.missing) == ("B", "Z")
    assert str(err) == "Task 'B' depends on unknown task 'Z'."
    assert err.to_detail()["missing"] == "Z"


def test_first_unknown_dependency_in_encounter_order_is_reported():
    tasks = make_tasks({"A": ["X"], "B": ["Y"], "C": ["A", "W"]})
    with pytest.raises(UnknownDependencyError) as exc_info:
        validate_tasks(tasks)
    assert (exc_info.value.task, exc_info.value.missing) == ("A", "X")

    tasks = make_tasks({"A": [], "B": ["A", "Q", "R"]})
    with pytest.raises(UnknownDependencyError) as exc_info:
        validate_tasks(tasks)
    assert exc_info.value.missing == "Q"


def test_dependency_on_later_task_is_known():
    tasks = make_tasks({"A": ["B"], "B": []})
    assert validate_tasks(tasks) == ["A", "B"]


def test_duplicate_title_rejected():
    tasks = make_tasks({"A": []}) + make_tasks({"B": []}) + make_tasks({"A": ["B"]})
    with pytest.raises(DuplicateTaskTitleError) as exc_info:
        validate_tasks(tasks)
    assert exc_info.value.title == "A"
    assert exc_info.value.to_detail()["error"] == "duplicate_task_title"


def test_duplicate_title_checked_before_dependencies():
    tasks = make_tasks({"A": ["missing"]}) + make_tasks({"A": []})
    with pytest.raises(DuplicateTaskTitleError):
        validate_tasks(tasks)
