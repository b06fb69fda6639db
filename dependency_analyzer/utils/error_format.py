"""Display helpers for exceptions raised while analyzing a project."""

from __future__ import annotations

from rich.markup import escape as _escape_markup

# Fallback text for exceptions the analyzer may surface without a message
FRIENDLY_MESSAGES: dict[type[BaseException], str] = {
    NotImplementedError: "Resolution is not implemented for this resolver.",
    OSError: "A project or settings file could not be accessed.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Describe an exception in one non-empty line.

    Examples:
        >>> format_error_message(NotImplementedError())
        'NotImplementedError: Resolution is not implemented for this resolver.'

        >>> format_error_message(ValueError("bad glob"), include_type=False)
        'bad glob'
    """
    type_name = type(e).__name__
    message = str(e) or next(
        (text for exc_type, text in FRIENDLY_MESSAGES.items() if isinstance(e, exc_type)),
        "(no additional details)",
    )

    if not include_type or message.startswith(type_name):
        return message
    return f"{type_name}: {message}"


def escape_markup(value: object) -> str:
    """Escape paths and messages before interpolating them into Rich markup."""
    return _escape_markup(str(value))
