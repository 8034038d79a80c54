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


"""Unit tests for error codes and exception helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from eeaforge._internal.error_codes import error_code_catalog, error_code_for
from eeaforge._internal.exceptions import EeaforgeError, format_causal_chain, iter_causes
from eeaforge.annotations import ArchiveClosedError, ClassAnnotationError
from eeaforge.config import ConfigFieldChoiceError
from eeaforge.metadata import TypeModelValidationError
from eeaforge.signatures import InvalidWildcardError

pytestmark = pytest.mark.unit


def test_error_codes_follow_class_hierarchy() -> None:
    assert error_code_for(ArchiveClosedError(Path("a.zip"))) == "EF311"
    assert error_code_for(ConfigFieldChoiceError("x", ("a",))) == "EF112"
    assert error_code_for(InvalidWildcardError(None, "bad")) == "EF203"
    assert error_code_for(TypeModelValidationError("m.json", "bad")) == "EF401"


def test_unknown_errors_use_generic_code() -> None:
    class CustomError(EeaforgeError):
        pass

    assert error_code_for(CustomError()) == "EF000"
    assert error_code_for(RuntimeError("boom")) == "EF000"


def test_error_code_catalog_is_unique_and_qualified() -> None:
    catalog = error_code_catalog()

    assert catalog["eeaforge.annotations.errors.ClassAnnotationError"] == "EF300"
    assert len(set(catalog.values())) == len(catalog)


def test_causal_chain_joins_messages() -> None:
    root = ValueError("root cause")
    middle = RuntimeError("")
    middle.__cause__ = root
    top = ClassAnnotationError("com.example.Widget")
    top.__cause__ = middle

    assert iter_causes(top) == [top, middle, root]
    assert format_causal_chain(top) == "Could not write external annotations for com.example.Widget: root cause"


def test_causal_chain_stops_on_cycles() -> None:
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first

    assert iter_causes(first) == [first, second]
