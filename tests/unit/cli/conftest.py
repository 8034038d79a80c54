# Copyright 2025 CrownOps Engineering
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


"""Fixtures shared by CLI tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from eeaforge._internal.logging_utils import CHILD_LOGGERS, ROOT_LOGGER_NAME
from tests.fixtures.builders import write_type_model

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_eeaforge_logging() -> Iterator[None]:
    """Undo the handler and levels installed by ``main``."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(logging.NOTSET)


@pytest.fixture
def model_file(tmp_path: Path) -> Path:
    """Write the default type-model document and return its path."""
    return write_type_model(tmp_path / "library.json")
