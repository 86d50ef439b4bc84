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

"""Count type capabilities.

A count type is any callable ``N`` where ``N()`` builds the zero value and
``N(1)`` builds the value of a single occurrence. The built-in numeric
types, ``Decimal`` and ``Fraction`` all qualify.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Protocol, TypeVar


class Count(Protocol):
    """Values that can be accumulated with ``+=``."""

    def __add__(self, other: Any) -> Any: ...


N = TypeVar("N")

CountType = Callable[..., N]

COUNT_TYPES: dict[str, Callable[..., Any]] = {
    "int": int,
    "float": float,
    "decimal": Decimal,
    "fraction": Fraction,
}


def zero_of(count_type: CountType) -> Any:
    """Build a fresh zero of ``count_type``."""
    return count_type()


def one_of(count_type: CountType) -> Any:
    """Build the count of a single occurrence."""
    return count_type(1)


def resolve_count_type(name: str) -> Callable[..., Any]:
    """Look up a count type by its configuration name.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return COUNT_TYPES[name]
    except KeyError:
        raise ValueError(
            f"Unknown count type '{name}'. "
            f"Valid values: {', '.join(COUNT_TYPES)}"
        ) from None


def count_type_name(count_type: CountType) -> str:
    """Reverse of resolve_count_type, falling back to the type's name."""
    for name, candidate in COUNT_TYPES.items():
        if candidate is count_type:
            return name
    return getattr(count_type, "__name__", repr(count_type))


def parse_count(value: Any, count_type: CountType) -> Any:
    """Convert a raw value read from a file into ``count_type``.

    Strings are passed straight to the constructor. Numbers go through
    ``str`` first so ``Decimal(0.1)`` does not pick up binary noise.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got boolean {value!r}")
    if isinstance(value, str):
        text = value.strip()
    elif isinstance(value, (int, float)):
        text = str(value)
    else:
        raise ValueError(f"Expected a number, got {type(value).__name__} {value!r}")

    try:
        return count_type(text)
    except ArithmeticError as e:
        # decimal.InvalidOperation is not a ValueError
        raise ValueError(f"Invalid count {text!r}: {e}") from e
