"""Markup contract for the regional booking page.

Everything that ties extraction to the structure of the source page lives
here, so a redesign of the page only requires a new ``PageSelectors``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

LIST_CONTAINER_CLASS = "mottagningbookabletimeslistblock"
BLOCK_ROW_CLASSES: tuple[str, ...] = ("block__row", "media")

LABEL_PATTERN = re.compile(r"^\s*(?P<region>[^:]+):\s+(?P<organization>.+?)\s*$")
ANNOTATION_PATTERN = re.compile(r"^\s*\((?P<count>\d+)")


def _block_selector(container_class: str, row_classes: tuple[str, ...]) -> str:
    row = "".join(f".{name}" for name in row_classes)
    return f".{container_class} {row}"


@dataclass(slots=True, frozen=True)
class PageSelectors:
    """CSS selectors and text patterns describing one booking block."""

    block: str = _block_selector(LIST_CONTAINER_CLASS, BLOCK_ROW_CLASSES)
    label: str = "h3"
    link: str = "a"
    annotation: str = "span"
    label_pattern: re.Pattern[str] = field(default=LABEL_PATTERN)
    annotation_pattern: re.Pattern[str] = field(default=ANNOTATION_PATTERN)


DEFAULT_SELECTORS = PageSelectors()
