from htmxdemo.decorators import component
from htmxdemo.html import escape, hx
from htmxdemo.views import Template


@component
def CountDisplay(*, count: int):
    yield f"""\
<div id="count-display" class="display-4">
    <div class="count">{escape(count)}</div>
</div>"""


@component
def CounterPage(*, count: int):
    yield """\
<h1>Counter Demo</h1>
<p class="lead">The count lives on the server and is shared by every visitor.</p>
"""
    yield from CountDisplay(count=count)
    yield f"""
<button class="btn btn-primary"{hx(post="/counter/increment", target="#count-display", swap="outerHTML")}>
    Increment
</button>"""


TEMPLATE = Template(
    title="Counter Demo",
    page=CounterPage,
    fragments={"count-display": CountDisplay},
)
