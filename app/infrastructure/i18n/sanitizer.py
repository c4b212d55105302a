"""Sanitization of translated strings before they are embedded in pages.

Translations may carry a little markup (links, emphasis). Two independent
levels control what survives:

- tags level: which tags are kept, every other tag is stripped (its text
  content stays);
- attributes level: which attributes kept tags may carry.

Levels are "high" (strictest), "moderate" and "low". Unknown levels are
treated as "high".
"""

import re
from typing import Dict, FrozenSet, Optional

ALLOWED_TAGS: Dict[str, FrozenSet[str]] = {
    "high": frozenset(),
    "moderate": frozenset({"span", "em", "strong", "b", "i", "br"}),
    "low": frozenset(
        {"span", "em", "strong", "b", "i", "br", "p", "ul", "ol", "li", "a", "font", "style"}
    ),
}

# None means every attribute is kept
ALLOWED_ATTRIBUTES: Dict[str, Optional[FrozenSet[str]]] = {
    "high": frozenset(),
    "moderate": frozenset({"class", "style", "href", "rel", "id"}),
    "low": None,
}

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RE = re.compile(r"<(/?)([A-Za-z][A-Za-z0-9]*)([^>]*)>")
_ATTR_RE = re.compile(
    r"""([A-Za-z_:][-A-Za-z0-9_:.]*)(?:\s*=\s*("[^"]*"|'[^']*'|[^\s"'>]+))?"""
)
_SCRIPT_SCHEME_RE = re.compile(r"^\s*(javascript|vbscript|data):", re.IGNORECASE)
# "<" followed by something a browser would read as the start of markup
_STRAY_OPENER_RE = re.compile(r"<(?=[A-Za-z/!?])")


def _filter_attributes(raw: str, allowed: Optional[FrozenSet[str]]) -> str:
    if allowed is None:
        return raw

    kept = []
    for match in _ATTR_RE.finditer(raw):
        name, value = match.group(1), match.group(2)
        if name.lower() not in allowed:
            continue
        if value is None:
            kept.append(name)
            continue
        if _SCRIPT_SCHEME_RE.match(value.strip("\"'")):
            continue
        kept.append(f"{name}={value}")

    return "".join(f" {attribute}" for attribute in kept)


def sanitize_string(
    value: str, tags_level: str = "high", attributes_level: str = "high"
) -> str:
    """Strip disallowed tags and attributes from ``value``.

    Args:
        value: String to sanitize.
        tags_level: "high", "moderate" or "low".
        attributes_level: "high", "moderate" or "low".

    Returns:
        The sanitized string.

    Example:
        >>> sanitize_string('<a href="/x" onclick="go()">Go</a>', "low", "moderate")
        '<a href="/x">Go</a>'
    """
    allowed_tags = ALLOWED_TAGS.get(tags_level, ALLOWED_TAGS["high"])
    allowed_attributes = ALLOWED_ATTRIBUTES.get(
        attributes_level, ALLOWED_ATTRIBUTES["high"]
    )

    def _replace(match: "re.Match[str]") -> str:
        closing, name, rest = match.group(1), match.group(2), match.group(3)
        if name.lower() not in allowed_tags:
            return ""
        if closing:
            return f"</{name}>"
        self_closing = rest.rstrip().endswith("/")
        attributes = _filter_attributes(
            rest.rstrip().rstrip("/").rstrip(), allowed_attributes
        )
        return f"<{name}{attributes}{' /' if self_closing else ''}>"

    # Removing a tag can join its neighbours into a new one
    previous = None
    while previous != value:
        previous = value
        value = _TAG_RE.sub(_replace, _COMMENT_RE.sub("", value))

    return _escape_stray_openers(value)


def _escape_stray_openers(value: str) -> str:
    """Escape every ``<`` that could open markup but is not a kept tag."""
    pieces = []
    position = 0
    for match in _TAG_RE.finditer(value):
        pieces.append(_STRAY_OPENER_RE.sub("&lt;", value[position : match.start()]))
        pieces.append(match.group(0))
        position = match.end()
    pieces.append(_STRAY_OPENER_RE.sub("&lt;", value[position:]))
    return "".join(pieces)
