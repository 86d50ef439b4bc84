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

"""Table renderer using Rich for terminal output."""

from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from counterkit.results import CountResult
from counterkit.renderers.base import OutputFormat


class TableRenderer:
    """Renders a CountResult as a ranked table using Rich."""

    format = OutputFormat.TEXT

    def render(self, result: CountResult, **options) -> str:
        """Render the result as a plain-text table.

        Args:
            result: The count result to render
            **options: Additional options (width, title)

        Returns:
            Table text with a one-line summary underneath
        """
        table = Table(title=options.get("title", result.source or None))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Item")
        table.add_column("Count", justify="right", style="cyan")

        for rank, (item, count) in enumerate(result.entries, start=1):
            table.add_row(str(rank), Text(str(item)), str(count))

        console = Console(
            file=StringIO(),
            width=options.get("width", 100),
            record=True,
        )
        console.print(table)
        console.print(self._summary(result))

        return console.export_text()

    def _summary(self, result: CountResult) -> str:
        summary = (
            f"{result.distinct} distinct, total {result.total} "
            f"({result.count_type}, {result.operation})"
        )
        if result.truncated:
            summary += f", showing top {len(result.entries)}"
        return summary
