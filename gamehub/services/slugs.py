from __future__ import annotations

import re
from urllib.parse import quote, unquote

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]")
_DASH_RUN_RE = re.compile(r"-+")


def tag_slug(name: str) -> str:
    return _WHITESPACE_RE.sub("-", str(name or "").strip().lower())


def category_slug(name: str) -> str:
    return tag_slug(name)


def decode_tag_slug(slug: str) -> str:
    return unquote(str(slug or "")).replace("-", " ")


def tag_href(name: str) -> str:
    return f"/tags/{quote(tag_slug(name), safe='')}"


def game_slug(title: str) -> str:
    lowered = _NON_SLUG_RE.sub("-", str(title or "").lower())
    return _DASH_RUN_RE.sub("-", lowered).strip("-")
