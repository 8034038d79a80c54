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


"""Fixtures shared across all unit tests."""

from __future__ import annotations

import pytest

from eeaforge.nullability import AnnotationNullability
from eeaforge.signatures.shapes import ClassDescription
from tests.fixtures.builders import MAYBE_NIL, NEVER_NIL, build_fixture_class, fixture_nullability


@pytest.fixture(scope="session")
def annotated() -> AnnotationNullability:
    """Provide the provider reading the fixture annotations."""
    return fixture_nullability()


@pytest.fixture
def plain_class() -> ClassDescription:
    """Return the fixture class without nullness annotations."""
    return build_fixture_class("Test")


@pytest.fixture
def nullable_class() -> ClassDescription:
    """Return the fixture class with every reference element marked nullable."""
    return build_fixture_class("NullableTest", MAYBE_NIL)


@pytest.fixture
def nonnull_class() -> ClassDescription:
    """Return the fixture class with every reference element marked non-null."""
    return build_fixture_class("NonnullTest", NEVER_NIL)
