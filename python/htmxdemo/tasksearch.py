"""Static task dataset with name search and lookup by id."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from htmxdemo.errors import DatasetError
from htmxdemo.log import get_logger

logger = get_logger(__name__)

DEFAULT_TASKS_PATH = Path(__file__).parent / "data" / "tasks.json"


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str = ""


_TASK_LIST = TypeAdapter(list[Task])


def load_tasks(path: str | Path = DEFAULT_TASKS_PATH) -> list[Task]:
    """Load the task dataset from a JSON file.

    Args:
        path: JSON file holding an array of task objects.

    Returns:
        Tasks in file order.

    Raises:
        DatasetError: If the file is missing, unreadable, not valid JSON,
            does not match the task schema, or repeats an id.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DatasetError("Cannot read task dataset", path, original_error=e) from e

    try:
        tasks = _TASK_LIST.validate_json(raw)
    except ValidationError as e:
        raise DatasetError("Malformed task dataset", path, original_error=e) from e

    seen: set[int] = set()
    for task in tasks:
        if task.id in seen:
            raise DatasetError(f"Duplicate task id {task.id}", path)
        seen.add(task.id)

    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


class TaskSearchService:
    """Read-only queries over a dataset loaded once at startup."""

    def __init__(self, tasks: Sequence[Task]):
        self._tasks = tuple(tasks)

    @classmethod
    def from_path(cls, path: str | Path = DEFAULT_TASKS_PATH) -> "TaskSearchService":
        return cls(load_tasks(path))

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def search(self, query: str | None) -> list[Task]:
        """Tasks whose name contains ``query``, ignoring case.

        A blank query matches every task. Dataset order is kept.
        """
        if query is None or not query.strip():
            return self.all_tasks()

        needle = query.casefold()
        results = [task for task in self._tasks if needle in task.name.casefold()]
        logger.debug("Search %r matched %d tasks", query, len(results))
        return results

    def get_task_by_id(self, task_id: int) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)
