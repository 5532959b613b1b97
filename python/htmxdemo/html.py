"""HTML escaping and attribute helpers for htmxdemo components.

Components build markup with f-strings. Every dynamic value goes through
escape() (or one of the attribute helpers) so user input never reaches the
page unescaped.
"""

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'escape',
    'render_attr',
    'render_attrs',
    'render_class',
    'hx',
]


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute.

    - True: renders just the attribute name (e.g., "disabled")
    - False/None: renders nothing
    - Other values: renders name="escaped_value"

    Example:
        >>> render_attr("disabled", True)
        ' disabled'
        >>> render_attr("value", '"quoted"')
        ' value="&#34;quoted&#34;"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    return f' {name}="{escape(value)}"'


def render_attrs(attrs: dict) -> str:
    """Render a dictionary as HTML attributes, in insertion order."""
    if not attrs:
        return ''
    return ''.join(render_attr(k, v) for k, v in attrs.items())


def render_class(*values) -> str:
    """Render a class attribute value.

    Strings pass through, lists and tuples are flattened, and dict keys are
    kept when their value is truthy.

    Example:
        >>> render_class("form-control", {"is-invalid": True, "is-valid": False})
        'form-control is-invalid'
    """
    classes = []
    for value in values:
        if not value:
            continue
        if isinstance(value, str):
            classes.append(value)
        elif isinstance(value, dict):
            classes.extend(k for k, v in value.items() if v)
        elif isinstance(value, (list, tuple)):
            nested = render_class(*value)
            if nested:
                classes.append(nested)
    return ' '.join(classes)


def hx(**attrs) -> str:
    """Render htmx attributes from keyword arguments.

    Underscores in names become dashes and every name gets the ``hx-``
    prefix, so ``hx(post="/x", swap="outerHTML")`` renders
    ``' hx-post="/x" hx-swap="outerHTML"'``.
    """
    return render_attrs({f"hx-{k.replace('_', '-')}": v for k, v in attrs.items()})
