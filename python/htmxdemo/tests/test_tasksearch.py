"""Test task dataset loading, search, lookup and the search routes."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from htmxdemo.app import create_app
from htmxdemo.config import Settings
from htmxdemo.errors import DatasetError
from htmxdemo.tasksearch import Task, TaskSearchService, load_tasks


@pytest.fixture(scope="module")
def service() -> TaskSearchService:
    return TaskSearchService.from_path()


class TestLoadTasks:
    def test_bundled_dataset(self):
        tasks = load_tasks()

        assert len(tasks) == 25
        assert [t.id for t in tasks] == list(range(1, 26))
        assert tasks[0] == Task(
            id=1,
            name="Setup development environment",
            description=tasks[0].description,
        )

    def test_tasks_are_immutable(self):
        task = load_tasks()[0]
        with pytest.raises(ValidationError):
            task.name = "changed"

    def test_missing_file(self, tmp_path: Path):
        path = tmp_path / "missing.json"

        with pytest.raises(DatasetError, match="Cannot read task dataset") as exc_info:
            load_tasks(path)

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "tasks.json"
        path.write_text("[{not json")

        with pytest.raises(DatasetError, match="Malformed task dataset"):
            load_tasks(path)

    def test_wrong_shape(self, tmp_path: Path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps({"id": 1, "name": "Not a list"}))

        with pytest.raises(DatasetError, match="Malformed task dataset"):
            load_tasks(path)

    def test_missing_field(self, tmp_path: Path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([{"id": 1}]))

        with pytest.raises(DatasetError) as exc_info:
            load_tasks(path)

        assert exc_info.value.original_error is not None

    def test_duplicate_ids(self, tmp_path: Path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([{"id": 1, "name": "a"}, {"id": 1, "name": "b"}]))

        with pytest.raises(DatasetError, match="Duplicate task id 1"):
            load_tasks(path)

    def test_description_optional(self, tmp_path: Path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([{"id": 7, "name": "Only a name"}]))

        assert load_tasks(path) == [Task(id=7, name="Only a name", description="")]

    def test_bad_dataset_aborts_startup(self, tmp_path: Path):
        """The app refuses to start without a usable dataset."""
        settings = Settings(secret_key="x", tasks_path=tmp_path / "nope.json")

        with pytest.raises(DatasetError):
            create_app(settings)


class TestSearch:
    @pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
    def test_blank_query_returns_everything(self, service, query):
        assert service.search(query) == service.all_tasks()

    def test_filters_by_name(self, service):
        results = service.search("database")

        assert [t.name for t in results] == [
            "Design database schema",
            "Set up database migrations",
        ]

    @pytest.mark.parametrize("query", ["auth", "environment", "Test", "set up"])
    def test_case_insensitive(self, service, query):
        expected = service.search(query)

        assert service.search(query.upper()) == expected
        assert service.search(query.lower()) == expected
        assert expected

    @pytest.mark.parametrize("query", ["e", "tion", "API", "Write"])
    def test_results_match_and_keep_dataset_order(self, service, query):
        results = service.search(query)
        all_tasks = service.all_tasks()

        assert all(query.lower() in t.name.lower() for t in results)
        assert [all_tasks.index(t) for t in results] == sorted(all_tasks.index(t) for t in results)
        # No false negatives
        assert len(results) == sum(query.lower() in t.name.lower() for t in all_tasks)

    def test_no_match(self, service):
        assert service.search("nonexistent") == []

    def test_all_tasks_returns_copy(self, service):
        service.all_tasks().clear()
        assert len(service.all_tasks()) == 25


class TestGetTaskById:
    def test_found(self, service):
        task = service.get_task_by_id(1)

        assert task is not None
        assert task.name == "Setup development environment"

    @pytest.mark.parametrize("task_id", [0, 26, -1, 999])
    def test_absent(self, service, task_id):
        assert service.get_task_by_id(task_id) is None

    def test_every_id_resolves_to_its_task(self, service):
        for task in service.all_tasks():
            assert service.get_task_by_id(task.id) is task


class TestTaskSearchRoutes:
    def test_index_returns_full_page(self, client):
        response = client.get("/tasksearch")

        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "<!DOCTYPE html>" in body
        assert "Task Search" in body
        assert 'id="task-dropdown"' in body
        assert 'id="task-detail"' in body
        # Results area starts empty
        assert "Setup development environment" not in body
        assert "No tasks found" not in body

    def test_empty_query_shows_all_tasks(self, client):
        response = client.post("/tasksearch/search")

        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "<!DOCTYPE html>" not in body
        assert 'id="task-dropdown"' in body
        assert "Setup development environment" in body
        assert "Create user authentication" in body
        assert body.count("list-group-item ") == 25

    def test_filters_by_query_param(self, client):
        body = client.post("/tasksearch/search?query=authentication").get_data(as_text=True)

        assert 'id="task-dropdown"' in body
        assert "Create user authentication" in body
        assert "Setup development environment" not in body

    def test_query_from_form_body(self, client):
        body = client.post("/tasksearch/search", data={"query": "database"}).get_data(as_text=True)

        assert "Design database schema" in body
        assert "Create user authentication" not in body

    def test_case_insensitive(self, client):
        body = client.post("/tasksearch/search?query=AUTHENTICATION").get_data(as_text=True)

        assert "Create user authentication" in body

    def test_no_results_message(self, client):
        body = client.post("/tasksearch/search?query=nonexistent").get_data(as_text=True)

        assert "No tasks found matching your search" in body
        assert "nonexistent" in body

    def test_query_is_escaped(self, client):
        body = client.post("/tasksearch/search", data={"query": "<script>"}).get_data(as_text=True)

        assert "<script>" not in body
        assert "&lt;script&gt;" in body

    def test_results_load_details(self, client):
        body = client.post("/tasksearch/search?query=schema").get_data(as_text=True)

        assert 'hx-get="/tasksearch/3"' in body
        assert 'hx-target="#task-detail"' in body

    def test_detail_fragment(self, client):
        response = client.get("/tasksearch/1")

        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "<!DOCTYPE html>" not in body
        assert 'id="task-detail"' in body
        assert "Setup development environment" in body
        assert "Install necessary tools" in body

    def test_unknown_id_renders_empty_detail(self, client):
        response = client.get("/tasksearch/999")

        assert response.status_code == 200
        assert response.get_data(as_text=True) == '<div id="task-detail"></div>'

    @pytest.mark.parametrize("task_id", [-1, 0])
    def test_non_positive_id_renders_empty_detail(self, client, task_id):
        response = client.get(f"/tasksearch/{task_id}")

        assert response.status_code == 200
        assert response.get_data(as_text=True) == '<div id="task-detail"></div>'
