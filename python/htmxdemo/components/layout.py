from collections.abc import Iterable

from htmxdemo.decorators import component
from htmxdemo.html import escape

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"

NAV_LINKS = (
    ("/", "Counter"),
    ("/tasksearch", "Task Search"),
    ("/userform", "User Form"),
)


@component
def Layout(_content: Iterable[str] | None = None, *, title: str, htmx_url: str):
    yield f"""\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{escape(title)} | htmx demo</title>
    <link rel="stylesheet" href="{escape(BOOTSTRAP_CSS)}">
    <script src="{escape(htmx_url)}"></script>
</head>
<body>
<nav class="navbar navbar-expand bg-body-tertiary mb-4">
    <div class="container">
        <span class="navbar-brand">htmx demo</span>
        <ul class="navbar-nav">"""
    for href, label in NAV_LINKS:
        yield f"""
            <li class="nav-item"><a class="nav-link" href="{href}">{label}</a></li>"""
    yield """
        </ul>
    </div>
</nav>
<main class="container">
"""
    if _content is not None:
        yield from _content
    yield """
</main>
</body>
</html>"""
