import html
from typing import Optional


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Escape HTML special characters in free-text input to prevent XSS.
    Returns None if input is None; surrounding whitespace is stripped.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    return html.escape(value.strip(), quote=True)
