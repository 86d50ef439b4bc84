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

"""counterkit - counting containers with a generic count type.

Public API:
    - Counter: item -> count mapping with items/pairs constructors
    - CounterOp: named whole-counter operations

Example:
    from counterkit import Counter

    words = Counter.from_items("the cat and the hat".split())
    words["the"]            # 2
    words["dog"]            # 0, missing items count as zero
    words.most_common_ordered()[:1]   # [("the", 2)]

    weights = Counter.from_pairs([("a", 0.5), ("b", 1.0), ("a", 0.25)], float)
    weights["a"]            # 0.75
"""

from counterkit.arithmetic import CounterOp
from counterkit.counter import Counter
from counterkit.numeric import COUNT_TYPES, resolve_count_type

__version__ = "0.1.0"

__all__ = [
    "Counter",
    "CounterOp",
    "COUNT_TYPES",
    "resolve_count_type",
    "__version__",
]
