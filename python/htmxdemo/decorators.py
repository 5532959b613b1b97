"""The @component decorator for generator-based HTML components.

A component is a generator function that yields HTML chunks:

    @component
    def Badge(*, text=""):
        yield f'<span class="badge">{escape(text)}</span>'

    html = str(Badge(text="New"))

Components that wrap other markup accept ``_content`` as their first
parameter and yield from it:

    @component
    def Card(_content=None, *, title=""):
        yield f'<div class="card"><h1>{escape(title)}</h1>'
        if _content is not None:
            yield from _content
        yield '</div>'

    html = str(Card(Badge(text="New"), title="Hello"))

Component instances expose ``__html__`` so they can be interpolated into
other components through escape() without being escaped twice.
"""

import inspect

from markupsafe import Markup

__all__ = ["component"]


def component(fn):
    """Wrap a generator function so calling it returns a renderable component.

    Args:
        fn: A generator function yielding HTML chunks.

    Returns:
        A class whose instances can be iterated, or rendered with str().
    """
    if not inspect.isgeneratorfunction(fn):
        raise TypeError(f"@component expects a generator function, got {fn!r}")

    params = list(inspect.signature(fn).parameters)
    has_content_param = bool(params) and params[0] == "_content"

    class Component:
        __slots__ = ("_content", "_props")

        def __init__(self, _content=None, **props):
            if _content is not None and not has_content_param:
                raise TypeError(f"{fn.__name__}() does not accept content")
            self._content = _content
            self._props = props

        def __iter__(self):
            if has_content_param:
                return iter(fn(self._content, **self._props))
            return iter(fn(**self._props))

        def __str__(self):
            return "".join(self)

        def __html__(self):
            return Markup(str(self))

        def __repr__(self):
            return f"<{fn.__name__} {self._props!r}>"

    Component.__name__ = fn.__name__
    Component.__qualname__ = fn.__qualname__
    Component.__doc__ = fn.__doc__
    Component.__wrapped__ = fn

    return Component
