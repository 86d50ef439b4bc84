# Copyright 2026 Pennyworth Technologies, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Readers that turn text into item streams and (item, count) pair streams.

Pair files come in two shapes:

Text, one pair per line, count last::

    apples 3
    green pears 2   # items may contain spaces
    apples 1

``#`` starts a comment at the beginning of a line or after whitespace, so
items such as ``C#`` are kept intact.

YAML or JSON (``.yaml``, ``.yml``, ``.json``)::

    - [apples, 3]
    - {item: pears, count: 2}

A top-level mapping ``{apples: 3, pears: 2}`` is accepted too, although it
cannot carry duplicate items.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Callable

import yaml

from counterkit.numeric import parse_count

logger = logging.getLogger(__name__)

VALID_SPLIT_MODES = ("chars", "words", "lines")
DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")
COMMENT_RE = re.compile(r"(?:^|\s)#")


class SourceError(Exception):
    """Raised when an input source cannot be parsed."""

    pass


def iter_items(
    text: str, split: str = "words", case_sensitive: bool = True
) -> Iterator[str]:
    """Yield the items of ``text``.

    Args:
        text: Raw input text
        split: "chars" (non-whitespace characters), "words" or "lines"
        case_sensitive: If False, items are case-folded

    Raises:
        ValueError: If split is not a known mode
    """
    if split not in VALID_SPLIT_MODES:
        raise ValueError(
            f"Invalid split mode '{split}'. Valid values: {', '.join(VALID_SPLIT_MODES)}"
        )
    if not case_sensitive:
        text = text.casefold()

    if split == "chars":
        return (ch for ch in text if not ch.isspace())
    if split == "words":
        return iter(text.split())
    return (line.strip() for line in text.splitlines() if line.strip())


def parse_pairs_text(
    text: str, count_type: Callable[..., Any] = int
) -> Iterator[tuple[str, Any]]:
    """Parse ``item count`` lines.

    Raises:
        SourceError: On a line without a count or with an invalid count
    """
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = COMMENT_RE.split(raw, 1)[0].strip()
        if not line:
            continue

        parts = line.rsplit(None, 1)
        if len(parts) != 2:
            raise SourceError(f"Line {lineno}: expected '<item> <count>', got {raw!r}")

        item, raw_count = parts
        try:
            count = parse_count(raw_count, count_type)
        except ValueError as e:
            raise SourceError(f"Line {lineno}: {e}")

        logger.debug(f"Line {lineno}: {item!r} -> {count!r}")
        yield item, count


def _pair_from_entry(index: int, entry: Any) -> tuple[Any, Any]:
    if isinstance(entry, dict):
        if "item" not in entry or "count" not in entry:
            raise SourceError(f"Entry {index}: mapping needs 'item' and 'count' keys")
        return entry["item"], entry["count"]
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return entry[0], entry[1]
    raise SourceError(f"Entry {index}: expected [item, count], got {entry!r}")


def parse_pairs_document(
    data: Any, count_type: Callable[..., Any] = int
) -> Iterator[tuple[Any, Any]]:
    """Yield pairs from an already-loaded YAML/JSON document.

    Raises:
        SourceError: If the document has an unsupported shape
    """
    if data is None:
        return
    if isinstance(data, dict):
        entries: list[Any] = list(data.items())
    elif isinstance(data, list):
        entries = data
    else:
        raise SourceError(
            f"Expected a list of pairs or a mapping, got {type(data).__name__}"
        )

    for index, entry in enumerate(entries):
        item, raw_count = _pair_from_entry(index, entry)
        if isinstance(item, (list, dict)):
            raise SourceError(f"Entry {index}: item must be a scalar, got {item!r}")
        try:
            count = parse_count(raw_count, count_type)
        except ValueError as e:
            raise SourceError(f"Entry {index}: {e}")
        yield item, count


def load_pairs_text(
    text: str, count_type: Callable[..., Any] = int, document: bool = False
) -> list[tuple[Any, Any]]:
    """Parse pairs from text, either line-based or as a YAML/JSON document."""
    if document:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SourceError(f"Invalid YAML: {e}")
        return list(parse_pairs_document(data, count_type))
    return list(parse_pairs_text(text, count_type))


def load_pairs(path: Path, count_type: Callable[..., Any] = int) -> list[tuple[Any, Any]]:
    """Read a pairs file, choosing the format from its suffix.

    Args:
        path: File to read
        count_type: Constructor for counts

    Returns:
        List of (item, count) pairs in file order

    Raises:
        SourceError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceError(f"Error reading {path}: {e}")
    except UnicodeDecodeError as e:
        raise SourceError(f"{path}: not valid UTF-8 text ({e.reason} at byte {e.start})")

    document = path.suffix.lower() in DOCUMENT_SUFFIXES
    try:
        pairs = load_pairs_text(text, count_type, document=document)
    except SourceError as e:
        raise SourceError(f"{path}: {e}")

    logger.info(f"Loaded {len(pairs)} pairs from {path}")
    return pairs
