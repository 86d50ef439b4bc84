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

"""Base renderer and output format definitions."""

from enum import Enum
from typing import Protocol

from counterkit.results import CountResult


class OutputFormat(str, Enum):
    """Output format for rendering."""

    JSON = "json"
    TEXT = "text"


class ResultRenderer(Protocol):
    """Protocol for result renderers."""

    format: OutputFormat

    def render(self, result: CountResult, **options) -> str:
        """Render the result to the target format.

        Args:
            result: The count result to render
            **options: Additional format-specific options

        Returns:
            Rendered output
        """
        ...
