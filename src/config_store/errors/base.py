"""Root of the config store exception hierarchy."""

ExtraInfoType = dict[str, str | int | float | bool | None]


def render_error_message(message: str | None, extra_info: ExtraInfoType | None) -> str:
    """Join a message with its context as `message: (key: value;key: value)`.

    Without a message the context is rendered bare, without parentheses.
    """
    if not extra_info:
        return message or ""

    context: str = ";".join(f"{key}: {value}" for key, value in extra_info.items())

    if not message:
        return context

    return f"{message}: ({context})"


class BaseConfigStoreError(Exception):
    """Base exception for every error raised by config store loaders, stores and wrappers."""

    extra_info: ExtraInfoType

    def __init__(self, message: str | None = None, extra_info: ExtraInfoType | None = None):
        self.extra_info = dict(extra_info or {})

        super().__init__(render_error_message(message=message, extra_info=extra_info))
