"""View selection and rendering.

Request handlers never build markup themselves. They return a ``View``
naming a template and, for partial updates, one of its fragments:

    View.page("counter/counter", count=3)
    View.fragment("counter/counter :: count-display", count=4)

The ``Renderer`` maps that tag to output. Full pages are wrapped in the
document layout; fragments render only their region, with no doctype or
head, so htmx can swap them straight into the page.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from htmxdemo.errors import TemplateNotFoundError

FRAGMENT_SEPARATOR = "::"


@dataclass(frozen=True)
class View:
    """Tagged handler result: a full page or a named fragment plus its data."""

    template: str
    fragment: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> str:
        return "page" if self.fragment is None else "fragment"

    @classmethod
    def parse(cls, name: str, **data: Any) -> "View":
        """Build a view from ``template`` or ``template :: fragment``."""
        template, sep, fragment = name.partition(FRAGMENT_SEPARATOR)
        template = template.strip()
        fragment = fragment.strip() if sep else None
        if not template or sep and not fragment:
            raise ValueError(f"Invalid view name: {name!r}")
        return cls(template, fragment, data)

    @classmethod
    def page(cls, template: str, **data: Any) -> "View":
        return cls(template, None, data)

    @classmethod
    def fragment(cls, name: str, **data: Any) -> "View":
        view = cls.parse(name, **data)
        if view.fragment is None:
            raise ValueError(f"View name has no fragment: {name!r}")
        return view


@dataclass(frozen=True)
class Template:
    """A named template: optional full-page component plus its fragments."""

    title: str
    page: Callable | None = None
    fragments: dict[str, Callable] = field(default_factory=dict)


class Renderer:
    """Turns ``View`` results into HTML strings."""

    def __init__(self, templates: dict[str, Template], layout: Callable, **layout_props: Any):
        self.templates = templates
        self.layout = layout
        self.layout_props = layout_props

    def render(self, view: View) -> str:
        template = self.templates.get(view.template)
        if template is None:
            raise TemplateNotFoundError(f"Unknown template: {view.template!r}")

        if view.fragment is None:
            if template.page is None:
                raise TemplateNotFoundError(f"Template {view.template!r} has no full page")
            body = template.page(**view.data)
            return str(self.layout(body, title=template.title, **self.layout_props))

        fragment = template.fragments.get(view.fragment)
        if fragment is None:
            raise TemplateNotFoundError(
                f"Unknown fragment {view.fragment!r} in template {view.template!r}"
            )
        return str(fragment(**view.data))
