from __future__ import annotations

from urllib.parse import quote, unquote

# characters URI components leave untouched besides ASCII letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"

_HTML_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ('"', "&quot;"),
    ("'", "&#39;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def percent_encode(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def percent_decode(value: str) -> str:
    return unquote(value)


def html_escape(value: str) -> str:
    for char, entity in _HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def to_card_value(value: str) -> str:
    """Percent-decode then HTML-escape a value on its way into card text."""
    return html_escape(percent_decode(value))
