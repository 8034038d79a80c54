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


"""Property-based tests for nullness layering and signature rendering."""

from __future__ import annotations

from functools import reduce

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eeaforge.annotations import AnnotationDiffEngine
from eeaforge.nullability import CombinedNullability, NullabilityProvider, omit
from eeaforge.signatures import (
    OBJECT,
    ClassDescription,
    ClassType,
    MethodContext,
    MethodDescription,
    Nullness,
    ParameterContext,
    ParameterDescription,
    TypeShape,
    TypeVariable,
    type_signature,
)
from tests.property_based.strategies import (
    constant_providers,
    marker_nullness,
    nullness_values,
    reference_shapes,
    type_shapes,
)

pytestmark = pytest.mark.property

_METHOD = MethodDescription("apply", parameters=(ParameterDescription("value", OBJECT),), return_type=OBJECT)
_METHOD_CONTEXT = MethodContext(None, _METHOD)
_PARAMETER_CONTEXT = ParameterContext(_METHOD_CONTEXT, _METHOD.parameters[0], 0)


@given(nullness_values(), nullness_values())
def test_override_law(first: Nullness, second: Nullness) -> None:
    expected = Nullness.OMIT if first is Nullness.OMIT else second

    assert first.override(second) is expected


@given(nullness_values(), nullness_values(), nullness_values())
def test_override_is_associative(first: Nullness, second: Nullness, third: Nullness) -> None:
    assert first.override(second).override(third) is first.override(second.override(third))


@given(st.lists(constant_providers(), max_size=5))
def test_combined_provider_folds_from_undefined(providers: list[NullabilityProvider]) -> None:
    combined = CombinedNullability(providers)

    parameter = reduce(
        lambda acc, provider: acc.override(provider.parameter_nullness(_PARAMETER_CONTEXT)),
        providers,
        Nullness.UNDEFINED,
    )
    returned = reduce(
        lambda acc, provider: acc.override(provider.return_nullness(_METHOD_CONTEXT)),
        providers,
        Nullness.UNDEFINED,
    )

    assert combined.parameter_nullness(_PARAMETER_CONTEXT) is parameter
    assert combined.return_nullness(_METHOD_CONTEXT) is returned


@given(st.lists(constant_providers(), min_size=1, max_size=4))
def test_leading_omit_suppresses_every_layer(providers: list[NullabilityProvider]) -> None:
    combined = CombinedNullability([omit(), *providers])

    assert combined.parameter_nullness(_PARAMETER_CONTEXT) is Nullness.OMIT
    assert combined.return_nullness(_METHOD_CONTEXT) is Nullness.OMIT


@given(type_shapes(), nullness_values())
def test_rendering_is_deterministic(shape: TypeShape, nullness: Nullness) -> None:
    assert type_signature(shape, nullness) == type_signature(shape, nullness)


@given(reference_shapes(), marker_nullness())
def test_marker_follows_the_leading_token(shape: TypeShape, nullness: Nullness) -> None:
    plain = type_signature(shape)
    marked = type_signature(shape, nullness)

    assert marked == plain[0] + nullness.marker + plain[1:]


@given(type_shapes())
def test_undefined_and_omit_render_identically(shape: TypeShape) -> None:
    assert type_signature(shape, Nullness.UNDEFINED) == type_signature(shape, Nullness.OMIT)


@given(st.lists(reference_shapes(), min_size=1, max_size=4))
def test_omitting_provider_never_annotates(shapes: list[TypeShape]) -> None:
    methods = tuple(
        MethodDescription(
            f"m{index}",
            parameters=(ParameterDescription("value", shape, ("javax.annotation.Nullable",)),),
            return_type=shape,
            annotations=("javax.annotation.Nonnull",),
        )
        for index, shape in enumerate(shapes)
    )
    cls = ClassDescription(type=ClassType.of("com.example.Generated"), methods=methods)

    record = AnnotationDiffEngine(omit()).diff(cls)

    assert not record.annotated
    assert record.method_count == 0


@given(st.sampled_from("TUV"), marker_nullness())
def test_type_variables_carry_marker_before_symbol(symbol: str, nullness: Nullness) -> None:
    assert type_signature(TypeVariable(symbol), nullness) == f"T{nullness.marker}{symbol};"
