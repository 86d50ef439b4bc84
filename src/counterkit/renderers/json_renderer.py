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

"""JSON renderer for count results."""

import json

from counterkit.results import CountResult
from counterkit.renderers.base import OutputFormat


class JSONRenderer:
    """Renders a CountResult as JSON."""

    format = OutputFormat.JSON

    def render(self, result: CountResult, **options) -> str:
        """Render the result as JSON.

        Args:
            result: The count result to render
            **options: Additional options (indent, etc.)

        Returns:
            JSON string. Counts that JSON cannot hold (Decimal, Fraction)
            are written as strings.
        """
        indent = options.get("indent")
        return json.dumps(result.to_dict(), indent=indent, default=str)
