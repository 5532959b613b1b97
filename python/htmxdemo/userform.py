"""User form state, tag editing and validation rules."""

from collections.abc import Mapping

from pydantic import BaseModel, Field

from htmxdemo.log import get_logger
from htmxdemo.validation import Rule, ValidationResult, email, length, pattern, required, validate

logger = get_logger(__name__)

SEED_TAGS = ("htmx-enthusiast", "spring-boot-dev")

BOUND_FIELDS = ("name", "email", "phone")

USER_FORM_RULES: dict[str, tuple[Rule, ...]] = {
    "name": (
        required("Name is required"),
        length(2, 50, "Name must be between 2 and 50 characters"),
    ),
    "email": (
        required("Email is required"),
        email("Please enter a valid email address"),
    ),
    "phone": (
        required("Phone is required"),
        pattern(r"[0-9]{10}", "Phone must be exactly 10 digits"),
    ),
}


class UserFormState(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    tags: list[str] = Field(default_factory=list)


class UserFormService:
    def __init__(self, rules: Mapping[str, tuple[Rule, ...]] = USER_FORM_RULES):
        self.rules = rules

    def initialize_form(self) -> UserFormState:
        return UserFormState(tags=list(SEED_TAGS))

    def add_tag(self, form: UserFormState, tag: str | None) -> bool:
        """Append the trimmed tag; blank input is ignored."""
        if tag is None or not tag.strip():
            return False
        form.tags.append(tag.strip())
        logger.info("Added tag %r", tag.strip())
        return True

    def remove_tag(self, form: UserFormState, index: int | None) -> bool:
        """Remove the tag at ``index``; out-of-range indexes are ignored."""
        if index is None or not 0 <= index < len(form.tags):
            return False
        removed = form.tags.pop(index)
        logger.info("Removed tag %r at index %d", removed, index)
        return True

    def bind(self, form: UserFormState, data: Mapping[str, str]) -> None:
        """Copy submitted field values onto the form, keeping absent ones."""
        for name in BOUND_FIELDS:
            if name in data:
                setattr(form, name, data[name])

    def validate_form(self, form: UserFormState) -> ValidationResult:
        return validate(form.model_dump(include=set(BOUND_FIELDS)), self.rules)
