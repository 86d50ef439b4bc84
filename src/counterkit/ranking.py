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

"""Most-common rankings over a Counter."""

from __future__ import annotations

import heapq
from functools import cmp_to_key
from operator import itemgetter
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from counterkit.counter import Counter


def _compare_counts_desc(a: Any, b: Any) -> int:
    if a > b:
        return -1
    if a < b:
        return 1
    return 0


def _compare_items_asc(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def most_common(counter: Counter) -> list[tuple[Any, Any]]:
    """All (item, count) pairs sorted by descending count."""
    return sorted(counter.items(), key=itemgetter(1), reverse=True)


def most_common_tiebreaker(
    counter: Counter, tiebreaker: Callable[[Any, Any], int]
) -> list[tuple[Any, Any]]:
    """Like most_common, with ties ordered by a three-way comparison.

    Args:
        counter: The counter to rank
        tiebreaker: ``cmp(a, b)`` returning negative, zero or positive

    Returns:
        Sorted list of (item, count) pairs
    """

    def compare(left: tuple[Any, Any], right: tuple[Any, Any]) -> int:
        by_count = _compare_counts_desc(left[1], right[1])
        if by_count:
            return by_count
        return tiebreaker(left[0], right[0])

    return sorted(counter.items(), key=cmp_to_key(compare))


def most_common_ordered(counter: Counter) -> list[tuple[Any, Any]]:
    """most_common with ties broken by ascending item."""
    return most_common_tiebreaker(counter, _compare_items_asc)


def k_most_common_ordered(counter: Counter, k: int) -> list[tuple[Any, Any]]:
    """Top ``k`` entries of most_common_ordered.

    Uses a bounded heap when ``k`` is smaller than the counter, so only
    ``k`` entries are ever fully ordered.
    """
    if k <= 0:
        return []
    if k >= len(counter):
        return most_common_ordered(counter)

    def compare(left: tuple[Any, Any], right: tuple[Any, Any]) -> int:
        return _compare_counts_desc(left[1], right[1]) or _compare_items_asc(
            left[0], right[0]
        )

    return heapq.nsmallest(k, counter.items(), key=cmp_to_key(compare))
