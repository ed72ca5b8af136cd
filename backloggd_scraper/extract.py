from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from .errors import ParseError

_COUNT_RE = re.compile(r"\d+", re.ASCII)


def parse_document(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup or "", "html.parser")


def extract(document: Tag, selector: str) -> List[Tag]:
    """Return every node matching ``selector``; an empty list is not an error."""
    return document.select(selector)


def extract_first(document: Tag, selector: str, field: str) -> Tag:
    """Return the first node matching ``selector`` or raise ParseError(field)."""
    node = document.select_one(selector)
    if node is None:
        logger.debug("{}: no element matches {!r}", field, selector)
        raise ParseError(field, f"no element matches {selector!r}")
    return node


def extract_last(document: Tag, selector: str, field: str) -> Tag:
    nodes = extract(document, selector)
    if not nodes:
        logger.debug("{}: no element matches {!r}", field, selector)
        raise ParseError(field, f"no element matches {selector!r}")
    return nodes[-1]


def attribute(node: Tag, name: str) -> Optional[str]:
    """Return the attribute value, ``""`` when present but empty, None when absent."""
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        # multi-valued attributes such as class come back as lists
        return " ".join(value)
    return value


def require_attribute(node: Tag, name: str, field: str, allow_empty: bool = False) -> str:
    value = attribute(node, name)
    if value is None:
        raise ParseError(field, f"<{node.name}> has no {name!r} attribute")
    if not value and not allow_empty:
        raise ParseError(field, f"<{node.name}> has an empty {name!r} attribute")
    return value


def text(node: Tag) -> str:
    return node.get_text()


def first_child_text(node: Tag) -> str:
    """Text of the node's first child, whether that child is a string or an element."""
    if not node.contents:
        return ""
    child = node.contents[0]
    if isinstance(child, Tag):
        return child.get_text()
    return str(child)


def parse_count(value: str, field: str) -> int:
    """Parse a non-negative integer after trimming surrounding whitespace."""
    stripped = value.strip()
    if not _COUNT_RE.fullmatch(stripped):
        raise ParseError(field, f"{value!r} is not a non-negative integer")
    return int(stripped)
