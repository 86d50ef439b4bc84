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

"""Result schemas for JSON output.

Every CLI command that produces counts emits a CountResult, either as JSON
on stdout or rendered as a table.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any
import json

from counterkit.counter import Counter
from counterkit.numeric import count_type_name


@dataclass
class CountResult:
    """Ranked counts plus summary figures for one command."""

    operation: str  # count, sum, or a combine op
    source: str = ""
    count_type: str = "int"
    distinct: int = 0
    total: Any = 0
    entries: list[list[Any]] = field(default_factory=list)
    truncated: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_json(self) -> str:
        """Serialize to JSON string for stdout."""
        return json.dumps(asdict(self), default=str)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_counter(
        cls,
        counter: Counter,
        *,
        operation: str,
        source: str,
        top: int | None = None,
        ordered: bool = True,
    ) -> "CountResult":
        """Summarize a counter, keeping the ``top`` entries when given."""
        if top is not None:
            ranked = counter.k_most_common_ordered(top) if ordered else counter.most_common()[:top]
        else:
            ranked = counter.most_common_ordered() if ordered else counter.most_common()

        return cls(
            operation=operation,
            source=source,
            count_type=count_type_name(counter.count_type),
            distinct=len(counter),
            total=counter.total(),
            entries=[[item, count] for item, count in ranked],
            truncated=len(ranked) < len(counter),
        )
