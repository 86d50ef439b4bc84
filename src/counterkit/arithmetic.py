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

"""Whole-counter arithmetic.

Binary operations return a new counter with the left operand's count type.
The ``*_in_place`` variants mutate the left operand.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from counterkit.numeric import zero_of

if TYPE_CHECKING:
    from counterkit.counter import Counter


class CounterOp(str, Enum):
    """Named binary operations, as accepted by the CLI."""

    ADD = "add"  # sum of counts
    SUB = "sub"  # difference, positive counts only
    AND = "and"  # minimum over shared items
    OR = "or"  # maximum over all items


def _detached(counter: Counter, count):
    fresh = zero_of(counter.count_type)
    fresh += count
    return fresh


def add_in_place(left: Counter, right: Counter) -> None:
    for item, count in right.items():
        current = left[item] if item in left else zero_of(left.count_type)
        current += count
        left[item] = current


def add(left: Counter, right: Counter) -> Counter:
    """Sum counts over the union of items. Zero entries are kept."""
    result = left.copy()
    add_in_place(result, right)
    return result


def subtract_in_place(left: Counter, right: Counter) -> None:
    for item, count in right.items():
        if item not in left:
            continue
        current = left[item]
        if current > count:
            current -= count
            left[item] = current
        else:
            del left[item]


def subtract(left: Counter, right: Counter) -> Counter:
    """Subtract counts, keeping only items whose result stays positive."""
    result = left.copy()
    subtract_in_place(result, right)
    return result


def intersection(left: Counter, right: Counter) -> Counter:
    """Minimum count for every item present in both counters."""
    result = type(left)(left.count_type)
    for item, count in left.items():
        if item in right:
            result[item] = _detached(result, min(count, right[item]))
    return result


def union(left: Counter, right: Counter) -> Counter:
    """Maximum count for every item present in either counter.

    An item missing from one side takes part as zero.
    """
    result = left.copy()
    for item, count in right.items():
        current = result[item] if item in result else zero_of(result.count_type)
        if count > current:
            result[item] = _detached(result, count)
        elif item not in result:
            result[item] = current
    return result


def is_subset(left: Counter, right: Counter) -> bool:
    """True if ``left[item] <= right[item]`` for every item in ``left``."""
    return all(count <= right[item] for item, count in left.items())


def apply(op: CounterOp, left: Counter, right: Counter) -> Counter:
    """Apply a named operation."""
    if op == CounterOp.ADD:
        return add(left, right)
    if op == CounterOp.SUB:
        return subtract(left, right)
    if op == CounterOp.AND:
        return intersection(left, right)
    if op == CounterOp.OR:
        return union(left, right)
    raise ValueError(f"Unknown operation: {op}")
