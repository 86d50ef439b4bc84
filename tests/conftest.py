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

"""Pytest configuration and shared fixtures for counterkit tests."""

from pathlib import Path

import pytest

from counterkit.config import (
    ENV_COUNT_TYPE,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_FORMAT,
    ENV_QUIET,
    ENV_SPLIT,
    ENV_TOP,
)

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path, monkeypatch):
    """Keep tests away from the real home directory, cwd and env config."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for var in (ENV_COUNT_TYPE, ENV_LOG_LEVEL, ENV_OUTPUT_FORMAT, ENV_QUIET, ENV_SPLIT, ENV_TOP):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def home_dir(tmp_path):
    return tmp_path / "home"


@pytest.fixture
def work_dir(tmp_path):
    return tmp_path / "work"


@pytest.fixture
def pairs_file(work_dir):
    """A text pairs file with a duplicate item."""
    path = work_dir / "pairs.txt"
    path.write_text("a 1\nb 2\nc 3\na 4\n")
    return path
