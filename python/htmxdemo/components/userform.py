from htmxdemo.decorators import component
from htmxdemo.html import escape, hx, render_class
from htmxdemo.userform import UserFormState
from htmxdemo.validation import ValidationResult
from htmxdemo.views import Template

FIELDS = (
    ("name", "Name", "text"),
    ("email", "Email", "email"),
    ("phone", "Phone", "tel"),
)


@component
def FormField(*, name: str, label: str, type: str, value: str, errors: tuple[str, ...], validated: bool):
    css = render_class("form-control", {"is-invalid": bool(errors), "is-valid": validated and not errors})
    validate = hx(post="/userform/validate", trigger="change", target="#form-section", swap="outerHTML")
    yield f"""
    <div class="mb-3">
        <label for="{name}" class="form-label">{label}</label>
        <input id="{name}" name="{name}" type="{type}" class="{css}" value="{escape(value)}"{validate}>"""
    if errors:
        yield '\n        <div class="invalid-feedback">'
        yield "<br>".join(str(escape(message)) for message in errors)
        yield "</div>"
    yield "\n    </div>"


@component
def TagList(*, tags: list[str]):
    yield '<div id="tag-list" class="mb-3">\n    <div class="mb-2">'
    for index, tag in enumerate(tags):
        remove = hx(post=f"/userform/remove-tag?index={index}", target="#tag-list", swap="outerHTML")
        yield f"""
        <span class="badge text-bg-primary me-1">{escape(tag)}
            <button type="button" class="btn-close btn-close-white ms-1" aria-label="Remove {escape(tag)}"{remove}></button>
        </span>"""
    add = hx(post="/userform/add-tag", include="[name='newTag']", target="#tag-list", swap="outerHTML")
    yield f"""
    </div>
    <div class="input-group">
        <input class="form-control" name="newTag" placeholder="New tag">
        <button type="button" class="btn btn-outline-secondary"{add}>Add tag</button>
    </div>
</div>"""


@component
def FormSection(*, form: UserFormState, result: ValidationResult | None = None):
    submit = hx(post="/userform/submit", target="#form-section", swap="outerHTML")
    yield f'<div id="form-section">\n<form{submit}>'
    for name, label, type in FIELDS:
        yield from FormField(
            name=name,
            label=label,
            type=type,
            value=getattr(form, name),
            errors=result.messages(name) if result is not None else (),
            validated=result is not None,
        )
    yield '\n    <label class="form-label">Tags</label>\n'
    yield from TagList(tags=form.tags)
    yield """
    <button type="submit" class="btn btn-primary">Submit</button>
</form>
</div>"""


@component
def SuccessSection(*, form: UserFormState):
    yield f"""\
<div id="form-section">
    <div class="alert alert-success">
        <h4 class="alert-heading">Thanks, {escape(form.name)}!</h4>
        <p>Your details were submitted successfully.</p>
        <dl class="row mb-0">
            <dt class="col-sm-2">Email</dt><dd class="col-sm-10">{escape(form.email)}</dd>
            <dt class="col-sm-2">Phone</dt><dd class="col-sm-10">{escape(form.phone)}</dd>
            <dt class="col-sm-2">Tags</dt><dd class="col-sm-10">{escape(", ".join(form.tags))}</dd>
        </dl>
    </div>
    <a class="btn btn-outline-primary" href="/userform">Start over</a>
</div>"""


@component
def UserFormPage(*, form: UserFormState):
    yield """\
<h1>User Form Validation Demo</h1>
<p class="lead">Fields are checked on the server as you go; tags are kept in your session.</p>
"""
    yield from FormSection(form=form)


TEMPLATE = Template(
    title="User Form Validation Demo",
    page=UserFormPage,
    fragments={
        "form-section": FormSection,
        "tag-list": TagList,
    },
)

SUCCESS_TEMPLATE = Template(
    title="Submitted",
    fragments={"form-section-success": SuccessSection},
)
