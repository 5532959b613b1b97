"""Application factory."""

from dataclasses import dataclass

from flask import Flask, Response, request

from htmxdemo.components import TEMPLATES, Layout
from htmxdemo.config import Settings
from htmxdemo.counter import CounterService
from htmxdemo.log import configure_logging, get_logger
from htmxdemo.routes import counter_bp, tasksearch_bp, userform_bp
from htmxdemo.sessions import SessionFormStore
from htmxdemo.tasksearch import TaskSearchService
from htmxdemo.userform import UserFormService
from htmxdemo.views import Renderer, View

logger = get_logger(__name__)


@dataclass
class Services:
    counter: CounterService
    tasks: TaskSearchService
    userform: UserFormService
    forms: SessionFormStore
    renderer: Renderer


class HtmxDemo(Flask):
    """Flask application that accepts ``View`` results from handlers."""

    def make_response(self, rv):
        if isinstance(rv, View):
            rv = self.extensions["htmxdemo"].renderer.render(rv)
        return super().make_response(rv)


def _log_request(response: Response) -> Response:
    logger.debug("%s %s -> %s", request.method, request.path, response.status_code)
    return response


def create_app(settings: Settings | None = None) -> HtmxDemo:
    """Build the application.

    Raises:
        ConfigError: If settings come from an invalid environment.
        DatasetError: If the task dataset cannot be loaded.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    tasks = TaskSearchService.from_path(settings.tasks_path)
    userform = UserFormService()

    app = HtmxDemo(__name__)
    app.config.update(SECRET_KEY=settings.secret_key, DEBUG=settings.debug)
    app.extensions["htmxdemo"] = Services(
        counter=CounterService(),
        tasks=tasks,
        userform=userform,
        forms=SessionFormStore(userform.initialize_form, idle_timeout=settings.session_timeout),
        renderer=Renderer(TEMPLATES, Layout, htmx_url=settings.htmx_url),
    )

    app.register_blueprint(counter_bp)
    app.register_blueprint(tasksearch_bp)
    app.register_blueprint(userform_bp)
    app.after_request(_log_request)

    logger.info("htmxdemo ready with %d tasks", len(tasks.all_tasks()))
    return app
