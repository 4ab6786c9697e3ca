"""Validation utilities for Mustalah configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one message per field.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        Messages of the form ``Field '<dotted.path>': <msg>``; offending
        input is appended for value errors

    Example:
        >>> try:
        ...     GlossaryConfig(github={"timeout": -1})
        ... except PydanticValidationError as e:
        ...     flatten_pydantic_errors(e)
        ["Field 'github.timeout': Input should be greater than 0"]
    """
    messages: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc) if loc else "unknown"
        msg = error.get("msg", "Unknown error")

        if error.get("type") == "value_error":
            messages.append(
                f"Field '{field_path}': {msg} (received: {error.get('input')!r})"
            )
        else:
            messages.append(f"Field '{field_path}': {msg}")

    return messages or ["Validation failed with unknown error"]
