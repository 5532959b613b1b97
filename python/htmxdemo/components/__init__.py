"""Page and fragment components, registered by template name."""

from htmxdemo.components import counter, tasksearch, userform
from htmxdemo.components.layout import Layout

TEMPLATES = {
    "counter/counter": counter.TEMPLATE,
    "tasksearch/tasksearch": tasksearch.TEMPLATE,
    "userform/userform": userform.TEMPLATE,
    "userform/success": userform.SUCCESS_TEMPLATE,
}

__all__ = ["Layout", "TEMPLATES"]
