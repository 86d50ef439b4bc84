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

"""Counter - a hash-keyed tally with a generic count type."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from counterkit import arithmetic, ranking
from counterkit.numeric import Count, one_of, zero_of

T = TypeVar("T", bound=Hashable)
N = TypeVar("N", bound=Count)


class Counter(Generic[T, N]):
    """Mapping from items to counts.

    Missing items count as ``zero``. Iteration order is not part of the
    contract.

    Example:
        >>> Counter.from_items("abbccc").into_map()
        {'a': 1, 'b': 2, 'c': 3}
        >>> Counter.from_pairs([("a", 1), ("b", 2), ("a", 4)]).into_map()
        {'a': 5, 'b': 2}
    """

    def __init__(self, count_type: Callable[..., N] = int) -> None:
        self.count_type = count_type
        self._map: dict[T, N] = {}
        self.zero: N = zero_of(count_type)

    @classmethod
    def from_items(
        cls, items: Iterable[T], count_type: Callable[..., N] = int
    ) -> Counter[T, N]:
        """Count occurrences of each item."""
        counter = cls(count_type)
        counter.update(items)
        return counter

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[T, N]], count_type: Callable[..., N] = int
    ) -> Counter[T, N]:
        """Build a counter from ``(item, count)`` pairs.

        Counts for duplicate items are summed. A pair with a zero count
        still creates an entry.
        """
        counter = cls(count_type)
        counter.update_pairs(pairs)
        return counter

    @classmethod
    def from_map(
        cls, mapping: Mapping[T, N], count_type: Callable[..., N] = int
    ) -> Counter[T, N]:
        """Build a counter holding a copy of ``mapping``.

        Every count is re-accumulated onto a fresh zero, so the new counter
        never shares count objects with ``mapping``.
        """
        counter = cls(count_type)
        counter.update_pairs(mapping.items())
        return counter

    def update(self, items: Iterable[T]) -> None:
        """Add one to the count of every item in ``items``."""
        counts = self._map
        one = one_of(self.count_type)
        for item in items:
            count = counts[item] if item in counts else zero_of(self.count_type)
            count += one
            counts[item] = count

    def update_pairs(self, pairs: Iterable[tuple[T, N]]) -> None:
        """Add each pair's count to the running total for its item."""
        counts = self._map
        for item, item_count in pairs:
            count = counts[item] if item in counts else zero_of(self.count_type)
            count += item_count
            counts[item] = count

    def subtract(self, items: Iterable[T]) -> None:
        """Remove one occurrence of every item in ``items``.

        Counts never drop below zero; an entry is removed once it reaches zero.
        Items that are not present are ignored.
        """
        counts = self._map
        for item in items:
            if item not in counts:
                continue
            count = counts[item]
            if count > self.zero:
                count -= one_of(self.count_type)
                counts[item] = count
            if count == self.zero:
                del counts[item]

    # Read access

    @property
    def map(self) -> Mapping[T, N]:
        """Read-only view of the underlying mapping."""
        return MappingProxyType(self._map)

    def __getitem__(self, item: T) -> N:
        return self._map.get(item, self.zero)

    def __setitem__(self, item: T, count: N) -> None:
        self._map[item] = count

    def __delitem__(self, item: T) -> None:
        del self._map[item]

    def __contains__(self, item: object) -> bool:
        return item in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[T]:
        return iter(self._map)

    def get(self, item: T, default: Any = None) -> Any:
        return self._map.get(item, default)

    def keys(self):
        return self._map.keys()

    def values(self):
        return self._map.values()

    def items(self):
        return self._map.items()

    def total(self) -> N:
        """Sum of all counts."""
        result = zero_of(self.count_type)
        for count in self._map.values():
            result += count
        return result

    def into_map(self) -> dict[T, N]:
        """Return the counts as a plain dict."""
        return dict(self._map)

    def copy(self) -> Counter[T, N]:
        return type(self).from_map(self._map, self.count_type)

    # Ranking

    def most_common(self) -> list[tuple[T, N]]:
        """Items by descending count; ties in no particular order."""
        return ranking.most_common(self)

    def most_common_tiebreaker(
        self, tiebreaker: Callable[[T, T], int]
    ) -> list[tuple[T, N]]:
        """Items by descending count; ties ordered by ``tiebreaker(a, b)``."""
        return ranking.most_common_tiebreaker(self, tiebreaker)

    def most_common_ordered(self) -> list[tuple[T, N]]:
        """Items by descending count; ties by ascending item."""
        return ranking.most_common_ordered(self)

    def k_most_common_ordered(self, k: int) -> list[tuple[T, N]]:
        """The first ``k`` entries of most_common_ordered()."""
        return ranking.k_most_common_ordered(self, k)

    # Arithmetic

    def __add__(self, other: object) -> Counter[T, N]:
        if not isinstance(other, Counter):
            return NotImplemented
        return arithmetic.add(self, other)

    def __iadd__(self, other: object) -> Counter[T, N]:
        if not isinstance(other, Counter):
            return NotImplemented
        arithmetic.add_in_place(self, other)
        return self

    def __sub__(self, other: object) -> Counter[T, N]:
        if not isinstance(other, Counter):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __isub__(self, other: object) -> Counter[T, N]:
        if not isinstance(other, Counter):
            return NotImplemented
        arithmetic.subtract_in_place(self, other)
        return self

    def __and__(self, other: object) -> Counter[T, N]:
        if not isinstance(other, Counter):
            return NotImplemented
        return arithmetic.intersection(self, other)

    def __or__(self, other: object) -> Counter[T, N]:
        if not isinstance(other, Counter):
            return NotImplemented
        return arithmetic.union(self, other)

    def is_subset(self, other: Counter[T, N]) -> bool:
        """True if no item is counted more often here than in ``other``."""
        return arithmetic.is_subset(self, other)

    def is_superset(self, other: Counter[T, N]) -> bool:
        return arithmetic.is_subset(other, self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Counter):
            return self._map == other._map
        if isinstance(other, Mapping):
            return self._map == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map!r})"
