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

"""Renderers for count results."""

from counterkit.results import CountResult
from counterkit.renderers.base import OutputFormat, ResultRenderer
from counterkit.renderers.json_renderer import JSONRenderer
from counterkit.renderers.table import TableRenderer


def render_result(
    result: CountResult,
    *,
    format: OutputFormat = OutputFormat.JSON,
    **options,
) -> str:
    """Render a CountResult to the specified format.

    Args:
        result: The result to render
        format: Output format (JSON or TEXT)
        **options: Format-specific options

    Returns:
        Rendered output
    """
    if format == OutputFormat.TEXT:
        renderer: ResultRenderer = TableRenderer()
    else:
        renderer = JSONRenderer()

    return renderer.render(result, **options)


__all__ = [
    "OutputFormat",
    "ResultRenderer",
    "JSONRenderer",
    "TableRenderer",
    "render_result",
]
