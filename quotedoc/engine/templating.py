# quotedoc/engine/templating.py
"""
Small templating pass for the quote partials.

Two jobs:
  - placeholder substitution: ``{{key}}`` / ``{{{key}}}`` tokens, resolved by
    exact key match; unknown keys stay in the output untouched.
  - fragment surgery on the rendered HTML: pull out <style> blocks and the
    inner <body> content, and insert fragments around <head>/<body> tags.

The tag scanner skips HTML comments and the raw text of <script>/<style>
elements, so markup-looking text inside those never counts as a tag.
"""
from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Union


# -------------------------
# Placeholders
# -------------------------

_KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_-")


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Placeholder:
    key: str
    raw: str  # token exactly as written, used for pass-through


Token = Union[Text, Placeholder]


def _match_placeholder(source: str, start: int) -> Optional[tuple[str, int]]:
    """Try to read a placeholder at `start` (which points at "{{"). Returns (key, end)."""
    i = start + 2
    if source.startswith("{", i):
        i += 1
    key_start = i
    while i < len(source) and source[i] in _KEY_CHARS:
        i += 1
    key_end = i
    if key_end == key_start or not source.startswith("}}", i):
        return None
    i += 2
    if source.startswith("}", i):
        i += 1
    return source[key_start:key_end], i


def tokenize(source: str) -> List[Token]:
    tokens: List[Token] = []
    literal_start = 0
    pos = 0

    while True:
        start = source.find("{{", pos)
        if start == -1:
            break
        matched = _match_placeholder(source, start)
        if matched is None:
            pos = start + 1
            continue
        key, end = matched
        if start > literal_start:
            tokens.append(Text(source[literal_start:start]))
        tokens.append(Placeholder(key=key, raw=source[start:end]))
        literal_start = pos = end

    if literal_start < len(source):
        tokens.append(Text(source[literal_start:]))
    return tokens


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def populate_template(source: str, data: Mapping[str, Any]) -> str:
    parts: List[str] = []
    for token in tokenize(source):
        if isinstance(token, Text):
            parts.append(token.text)
        elif token.key in data:
            parts.append(_stringify(data[token.key]))
        else:
            parts.append(token.raw)
    return "".join(parts)


# -------------------------
# Tag scanning
# -------------------------

_TAG_RE = re.compile(r"<(/?)([A-Za-z][A-Za-z0-9-]*)(?:\s[^>]*)?/?>")
_RAW_TEXT_ELEMENTS = ("script", "style")


@dataclass(frozen=True)
class Tag:
    name: str  # lower-cased
    closing: bool
    start: int
    end: int


def iter_tags(html: str) -> Iterator[Tag]:
    pos = 0
    while True:
        lt = html.find("<", pos)
        if lt == -1:
            return
        if html.startswith("<!--", lt):
            close = html.find("-->", lt + 4)
            if close == -1:
                return
            pos = close + 3
            continue

        m = _TAG_RE.match(html, lt)
        if not m:
            pos = lt + 1
            continue

        tag = Tag(name=m.group(2).lower(), closing=bool(m.group(1)), start=m.start(), end=m.end())
        yield tag
        pos = m.end()

        if not tag.closing and tag.name in _RAW_TEXT_ELEMENTS:
            # jump straight to the matching close tag
            close = _find_raw_text_end(html, tag.name, pos)
            if close is None:
                return
            pos = close


def _find_raw_text_end(html: str, name: str, pos: int) -> Optional[int]:
    m = re.compile(rf"</{name}\s*>", re.IGNORECASE).search(html, pos)
    return m.start() if m else None


def _first(html: str, name: str, closing: bool) -> Optional[Tag]:
    for tag in iter_tags(html):
        if tag.name == name and tag.closing == closing:
            return tag
    return None


def _last(html: str, name: str, closing: bool) -> Optional[Tag]:
    found = None
    for tag in iter_tags(html):
        if tag.name == name and tag.closing == closing:
            found = tag
    return found


# -------------------------
# Fragment extraction / injection
# -------------------------


def extract_style_blocks(html: str) -> str:
    """All <style>...</style> elements, tags included, in document order."""
    blocks: List[str] = []
    open_tag: Optional[Tag] = None
    for tag in iter_tags(html):
        if tag.name != "style":
            continue
        if not tag.closing:
            open_tag = tag
        elif open_tag is not None:
            blocks.append(html[open_tag.start : tag.end])
            open_tag = None
    return "".join(blocks)


def extract_body_content(html: str) -> Optional[str]:
    """Inner HTML of <body ...>...</body>, or None when there is no body region."""
    opening = _first(html, "body", closing=False)
    if opening is None:
        return None
    closing = _last(html, "body", closing=True)
    if closing is None or closing.start < opening.end:
        return None
    return html[opening.end : closing.start]


def insert_before_tag(html: str, name: str, fragment: str, *, closing: bool = True) -> str:
    tag = _first(html, name, closing=closing)
    if tag is None:
        return html
    return html[: tag.start] + fragment + html[tag.start :]


def insert_after_tag(html: str, name: str, fragment: str, *, closing: bool = False) -> str:
    tag = _first(html, name, closing=closing)
    if tag is None:
        return html
    return html[: tag.end] + fragment + html[tag.end :]
