"""htmxdemo - server-driven partial page updates with htmx and Flask.

Public API exports:
- Application factory and settings
- Services behind the three demos (counter, task search, user form)
- View tagging and component helpers
"""

from htmxdemo.app import create_app
from htmxdemo.config import Settings
from htmxdemo.counter import CounterService
from htmxdemo.decorators import component
from htmxdemo.errors import ConfigError, DatasetError, HtmxDemoError, TemplateNotFoundError
from htmxdemo.sessions import SessionFormStore
from htmxdemo.tasksearch import Task, TaskSearchService, load_tasks
from htmxdemo.userform import UserFormService, UserFormState
from htmxdemo.views import View

__all__ = [
    # Application
    'create_app',
    'Settings',
    # Services
    'CounterService',
    'Task',
    'TaskSearchService',
    'load_tasks',
    'UserFormService',
    'UserFormState',
    'SessionFormStore',
    # Rendering
    'View',
    'component',
    # Errors
    'HtmxDemoError',
    'ConfigError',
    'DatasetError',
    'TemplateNotFoundError',
]
