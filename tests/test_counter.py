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

"""Tests for the Counter construction paths and lookups."""

import itertools
from decimal import Decimal
from fractions import Fraction

import pytest

from counterkit import Counter


class Tally:
    """Count type with a mutating __iadd__, to catch shared zero values."""

    def __init__(self, value=0):
        self.value = int(value)

    def __iadd__(self, other):
        self.value += other.value if isinstance(other, Tally) else other
        return self

    def __add__(self, other):
        return Tally(self.value + (other.value if isinstance(other, Tally) else other))

    def __eq__(self, other):
        if isinstance(other, Tally):
            return self.value == other.value
        return self.value == other

    def __repr__(self):
        return f"Tally({self.value})"


# -----------------------------------------------------------------------------
# Empty state
# -----------------------------------------------------------------------------


class TestEmptyCounter:
    """Tests for Counter() with no input."""

    def test_has_no_entries(self):
        counter = Counter()
        assert len(counter) == 0
        assert counter.into_map() == {}

    def test_lookup_yields_zero(self):
        counter = Counter()
        assert counter["anything"] == 0
        assert "anything" not in counter

    def test_zero_matches_count_type(self):
        assert Counter(float).zero == 0.0
        assert isinstance(Counter(float).zero, float)
        assert Counter(Decimal).zero == Decimal("0")
        assert Counter(Fraction).zero == Fraction(0)

    def test_total_of_empty_is_zero(self):
        assert Counter().total() == 0


# -----------------------------------------------------------------------------
# Items path
# -----------------------------------------------------------------------------


class TestFromItems:
    """Tests for Counter.from_items()."""

    def test_counts_characters(self):
        """Each occurrence adds one."""
        counter = Counter.from_items("abbccc")
        assert counter.into_map() == {"a": 1, "b": 2, "c": 3}

    def test_order_does_not_matter(self):
        expected = Counter.from_items("abbccc").into_map()
        for permutation in set(itertools.permutations("abbccc")):
            assert Counter.from_items(permutation).into_map() == expected

    def test_consumes_generator_once(self):
        consumed = []

        def produce():
            for item in ["x", "y", "x"]:
                consumed.append(item)
                yield item

        counter = Counter.from_items(produce())
        assert consumed == ["x", "y", "x"]
        assert counter.into_map() == {"x": 2, "y": 1}

    def test_generic_count_type(self):
        counter = Counter.from_items("aab", Fraction)
        assert counter["a"] == Fraction(2)
        assert isinstance(counter["a"], Fraction)

    def test_float_counts(self):
        counter = Counter.from_items(["x", "x"], float)
        assert counter["x"] == 2.0
        assert isinstance(counter["x"], float)

    def test_mutable_count_type_does_not_touch_zero(self):
        counter = Counter.from_items("aab", Tally)
        assert counter["a"] == 2
        assert counter["b"] == 1
        assert counter.zero == 0
        assert counter["missing"] == 0

    def test_source_error_propagates(self):
        def broken():
            yield "a"
            raise RuntimeError("upstream failure")

        with pytest.raises(RuntimeError, match="upstream failure"):
            Counter.from_items(broken())

    def test_unhashable_items_raise(self):
        with pytest.raises(TypeError):
            Counter.from_items([["not", "hashable"]])

    def test_update_adds_to_existing_counts(self):
        counter = Counter.from_items("ab")
        counter.update("bc")
        assert counter.into_map() == {"a": 1, "b": 2, "c": 1}


# -----------------------------------------------------------------------------
# Pairs path
# -----------------------------------------------------------------------------


class TestFromPairs:
    """Tests for Counter.from_pairs()."""

    def test_sums_duplicate_items(self):
        counter = Counter.from_pairs([("a", 1), ("b", 2), ("c", 3), ("a", 4)])
        assert counter.into_map() == {"a": 5, "b": 2, "c": 3}

    def test_order_does_not_matter(self):
        pairs = [("a", 1), ("b", 2), ("c", 3), ("a", 4)]
        expected = {"a": 5, "b": 2, "c": 3}
        for permutation in itertools.permutations(pairs):
            assert Counter.from_pairs(permutation).into_map() == expected

    def test_zero_count_pair_creates_entry(self):
        """A zero pair is present with count 0, unlike an unseen item."""
        counter = Counter.from_pairs([("a", 0)])
        assert "a" in counter
        assert counter.into_map() == {"a": 0}
        assert "b" not in counter
        assert counter["b"] == 0

    def test_cancelling_counts_keep_entry(self):
        counter = Counter.from_pairs([("a", 1), ("a", -1)])
        assert counter.into_map() == {"a": 0}

    def test_running_total_matches_single_pass(self):
        """Batching pairs does not change the result."""
        running = Counter.from_pairs([("a", 7)])
        running.update_pairs([("a", 7)])
        single = Counter.from_pairs([("a", 7), ("a", 7)])
        assert running["a"] == 14
        assert running == single

    def test_items_equal_single_pair(self):
        n = 5
        from_items = Counter.from_items(["z"] * n)
        from_pairs = Counter.from_pairs([("z", n)])
        assert from_items == from_pairs

    def test_decimal_counts(self):
        counter = Counter.from_pairs(
            [("a", Decimal("0.1")), ("a", Decimal("0.2"))], Decimal
        )
        assert counter["a"] == Decimal("0.3")

    def test_mutable_count_type_does_not_touch_zero(self):
        counter = Counter.from_pairs([("a", Tally(2)), ("a", Tally(3))], Tally)
        assert counter["a"] == 5
        assert counter.zero == 0

    def test_bad_arithmetic_propagates(self):
        with pytest.raises(TypeError):
            Counter.from_pairs([("a", "not a number")])

    def test_pairs_must_be_two_tuples(self):
        with pytest.raises(ValueError):
            Counter.from_pairs([("a", 1, 2)])


# -----------------------------------------------------------------------------
# Lookups and conversion
# -----------------------------------------------------------------------------


class TestLookups:
    """Tests for read access, mutation and conversion."""

    def test_getitem_never_raises(self):
        counter = Counter.from_items("ab")
        assert counter["a"] == 1
        assert counter["zzz"] == 0
        assert "zzz" not in counter

    def test_get_uses_default(self):
        counter = Counter.from_items("a")
        assert counter.get("a") == 1
        assert counter.get("b") is None
        assert counter.get("b", 0) == 0

    def test_setitem_and_delitem(self):
        counter = Counter()
        counter["x"] = 3
        assert counter["x"] == 3
        del counter["x"]
        assert "x" not in counter
        with pytest.raises(KeyError):
            del counter["x"]

    def test_iteration_and_views(self):
        counter = Counter.from_items("abb")
        assert set(counter) == {"a", "b"}
        assert set(counter.keys()) == {"a", "b"}
        assert sorted(counter.values()) == [1, 2]
        assert dict(counter.items()) == {"a": 1, "b": 2}

    def test_map_is_read_only(self):
        counter = Counter.from_items("a")
        with pytest.raises(TypeError):
            counter.map["a"] = 10
        assert counter.map["a"] == 1

    def test_into_map_is_a_copy(self):
        counter = Counter.from_items("a")
        plain = counter.into_map()
        plain["a"] = 99
        assert counter["a"] == 1

    def test_from_map(self):
        counter = Counter.from_map({"a": 2, "b": 1})
        assert counter["a"] == 2
        assert len(counter) == 2

    def test_total(self):
        assert Counter.from_items("abbccc").total() == 6
        assert Counter.from_pairs([("a", 0.5), ("b", 0.25)], float).total() == 0.75

    def test_copy_is_independent(self):
        original = Counter.from_items("aa")
        duplicate = original.copy()
        duplicate["a"] = 10
        assert original["a"] == 2
        assert duplicate.count_type is original.count_type

    def test_equality(self):
        assert Counter.from_items("ab") == Counter.from_items("ba")
        assert Counter.from_items("ab") == {"a": 1, "b": 1}
        assert Counter.from_items("ab") != Counter.from_items("abb")
        assert Counter.from_items("a") != "a"

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Counter())

    def test_repr(self):
        assert repr(Counter.from_items("a")) == "Counter({'a': 1})"


class TestSubtractItems:
    """Tests for Counter.subtract()."""

    def test_decrements_counts(self):
        counter = Counter.from_items("aaab")
        counter.subtract("a")
        assert counter.into_map() == {"a": 2, "b": 1}

    def test_removes_entries_reaching_zero(self):
        counter = Counter.from_items("ab")
        counter.subtract("b")
        assert "b" not in counter

    def test_ignores_missing_items(self):
        counter = Counter.from_items("a")
        counter.subtract("zz")
        assert counter.into_map() == {"a": 1}

    def test_never_goes_negative(self):
        counter = Counter.from_items("a")
        counter.subtract("aaa")
        assert counter.into_map() == {}

    def test_removes_existing_zero_entry(self):
        counter = Counter.from_pairs([("a", 0)])
        counter.subtract("a")
        assert "a" not in counter
