"""Application exceptions with contextual error messages."""

from pathlib import Path


class HtmxDemoError(Exception):
    """Base exception for all htmxdemo errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"{message}\n\n  File: {path}" if path else message)


class DatasetError(HtmxDemoError):
    """The task dataset could not be loaded at startup."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        original_error: Exception | None = None,
    ):
        self.original_error = original_error

        full_message = message
        if path:
            full_message += f"\n\n  File: {path}"

        if original_error:
            full_message += f"\n\n  Original error: {type(original_error).__name__}: {original_error}"

        Exception.__init__(self, full_message)
        self.path = path


class ConfigError(HtmxDemoError):
    pass


class TemplateNotFoundError(HtmxDemoError):
    pass
