"""Tagged-element writer for the game client's XML wire format.

Elements are built as strings in the exact order the client expects;
``raw=True`` embeds an already serialized fragment without escaping it.
"""

from xml.sax.saxutils import escape, quoteattr


def _format_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, int):
        return str(int(value))
    return escape(str(value))


def string_element(key: str, value, raw: bool = False) -> str:
    """``<key>value</key>``; None renders as an empty element."""
    content = value if raw and value is not None else _format_value(value)
    return f"<{key}>{content}</{key}>"


def tagged_string_element(key: str, value: str, attr_key: str, attr_value: str) -> str:
    """Wrap an already serialized body in ``<key attr_key="attr_value">``."""
    return f"<{key} {attr_key}={quoteattr(attr_value)}>{value}</{key}>"
