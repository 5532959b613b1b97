from collections.abc import Sequence

from htmxdemo.decorators import component
from htmxdemo.html import escape, hx
from htmxdemo.tasksearch import Task
from htmxdemo.views import Template

NO_RESULTS_MESSAGE = "No tasks found matching your search"


@component
def TaskDropdown(*, tasks: Sequence[Task] | None = None, query: str = ""):
    # tasks=None is the untouched page; an empty list is a search with no hits.
    yield '<div id="task-dropdown">'
    if tasks is not None:
        if tasks:
            yield '\n    <ul class="list-group">'
            for task in tasks:
                attrs = hx(get=f"/tasksearch/{task.id}", target="#task-detail", swap="outerHTML")
                yield f"""
        <li class="list-group-item list-group-item-action" role="button"{attrs}>{escape(task.name)}</li>"""
            yield '\n    </ul>\n'
        else:
            yield f"""
    <div class="alert alert-secondary">{NO_RESULTS_MESSAGE} &ldquo;{escape(query)}&rdquo;</div>
"""
    yield '</div>'


@component
def TaskDetail(*, task: Task | None = None):
    yield '<div id="task-detail">'
    if task is not None:
        yield f"""
    <div class="card mt-3">
        <div class="card-body">
            <h5 class="card-title">{escape(task.name)}</h5>
            <h6 class="card-subtitle mb-2 text-body-secondary">Task #{escape(task.id)}</h6>
            <p class="card-text">{escape(task.description)}</p>
        </div>
    </div>
"""
    yield '</div>'


@component
def TaskSearchPage():
    search = hx(
        post="/tasksearch/search",
        trigger="input changed delay:300ms, search, focus",
        target="#task-dropdown",
        swap="outerHTML",
    )
    yield f"""\
<h1>Task Search</h1>
<p class="lead">Type to filter tasks by name, then pick one to see its details.</p>
<input class="form-control" type="search" name="query" placeholder="Search tasks..." autocomplete="off"{search}>
"""
    yield from TaskDropdown()
    yield "\n"
    yield from TaskDetail()


TEMPLATE = Template(
    title="Task Search",
    page=TaskSearchPage,
    fragments={
        "task-dropdown": TaskDropdown,
        "task-detail": TaskDetail,
    },
)
