"""HTTP handlers for the counter, task search and user form demos.

Handlers return ``View`` objects; the application renders them.
"""

import secrets

from flask import Blueprint, current_app, request, session

from htmxdemo.log import get_logger
from htmxdemo.views import View

logger = get_logger(__name__)

SESSION_ID_KEY = "sid"

counter_bp = Blueprint("counter", __name__)
tasksearch_bp = Blueprint("tasksearch", __name__, url_prefix="/tasksearch")
userform_bp = Blueprint("userform", __name__, url_prefix="/userform")


def _services():
    return current_app.extensions["htmxdemo"]


def _session_id() -> str:
    sid = session.get(SESSION_ID_KEY)
    if sid is None:
        sid = session[SESSION_ID_KEY] = secrets.token_urlsafe(16)
    return sid


# Counter

@counter_bp.get("/")
def counter_index():
    return View.page("counter/counter", count=_services().counter.get_count())


@counter_bp.post("/counter/increment")
def counter_increment():
    count = _services().counter.increment()
    return View.fragment("counter/counter :: count-display", count=count)


# Task search

@tasksearch_bp.get("")
def tasksearch_index():
    return View.page("tasksearch/tasksearch")


@tasksearch_bp.post("/search")
def tasksearch_search():
    query = request.values.get("query", "")
    tasks = _services().tasks.search(query)
    return View.fragment("tasksearch/tasksearch :: task-dropdown", query=query, tasks=tasks)


@tasksearch_bp.get("/<int(signed=True):task_id>")
def tasksearch_detail(task_id: int):
    task = _services().tasks.get_task_by_id(task_id)
    return View.fragment("tasksearch/tasksearch :: task-detail", task=task)


# User form

@userform_bp.get("")
def userform_index():
    services = _services()
    sid = _session_id()
    with services.forms.lock(sid):
        form = services.forms.get_or_create(sid).model_copy(deep=True)
    return View.page("userform/userform", form=form)


@userform_bp.post("/validate")
def userform_validate():
    services = _services()
    sid = _session_id()
    with services.forms.lock(sid):
        form = services.forms.get_or_create(sid)
        services.userform.bind(form, request.values)
        result = services.userform.validate_form(form)
        form = form.model_copy(deep=True)
    return View.fragment("userform/userform :: form-section", form=form, result=result)


@userform_bp.post("/add-tag")
def userform_add_tag():
    services = _services()
    sid = _session_id()
    with services.forms.lock(sid):
        form = services.forms.get_or_create(sid)
        services.userform.bind(form, request.values)
        services.userform.add_tag(form, request.values.get("newTag"))
        tags = list(form.tags)
    return View.fragment("userform/userform :: tag-list", tags=tags)


@userform_bp.post("/remove-tag")
def userform_remove_tag():
    services = _services()
    sid = _session_id()
    with services.forms.lock(sid):
        form = services.forms.get_or_create(sid)
        services.userform.bind(form, request.values)
        services.userform.remove_tag(form, request.values.get("index", type=int))
        tags = list(form.tags)
    return View.fragment("userform/userform :: tag-list", tags=tags)


@userform_bp.post("/submit")
def userform_submit():
    services = _services()
    sid = _session_id()
    with services.forms.lock(sid):
        form = services.forms.get_or_create(sid)
        services.userform.bind(form, request.values)
        result = services.userform.validate_form(form)
        form = form.model_copy(deep=True)
        if result.valid:
            services.forms.clear(sid)

    if not result.valid:
        logger.debug("Submission rejected: %s", result.errors)
        return View.fragment("userform/userform :: form-section", form=form, result=result)

    logger.info("Form submitted for %r with %d tags", form.name, len(form.tags))
    return View.fragment("userform/success :: form-section-success", form=form)
