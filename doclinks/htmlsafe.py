"""Utility for escaping text that is inserted into HTML."""


def htmlsafe(value: object) -> str:
    """Escape ampersands and opening angle brackets."""
    return str(value).replace("&", "&amp;").replace("<", "&lt;")
