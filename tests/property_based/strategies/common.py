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


"""Hypothesis strategies for nullness values and type shapes."""

from __future__ import annotations

from hypothesis import strategies as st

from eeaforge.nullability import ConstantNullability, NullabilityProvider
from eeaforge.signatures import (
    ArrayType,
    ClassType,
    Nullness,
    Primitive,
    PrimitiveKind,
    TypeShape,
    TypeVariable,
    lower_bounded,
    unbounded,
    upper_bounded,
)

_IDENTIFIER = st.from_regex(r"[A-Z][A-Za-z0-9]{0,7}", fullmatch=True)
_PACKAGE = st.lists(st.from_regex(r"[a-z][a-z0-9]{0,5}", fullmatch=True), max_size=3).map(".".join)


def nullness_values() -> st.SearchStrategy[Nullness]:
    """Return a strategy over every nullness value."""
    return st.sampled_from(list(Nullness))


def marker_nullness() -> st.SearchStrategy[Nullness]:
    """Return a strategy over the nullness values that write a marker."""
    return st.sampled_from([Nullness.NULLABLE, Nullness.NONNULL])


def constant_providers() -> st.SearchStrategy[NullabilityProvider]:
    """Return providers answering fixed parameter and return nullness."""
    return st.builds(ConstantNullability, nullness_values(), nullness_values())


def class_types(max_arguments: int = 0) -> st.SearchStrategy[ClassType]:
    """Return non-generic (or shallowly generic) class references."""
    arguments = st.lists(type_variables(), max_size=max_arguments).map(tuple)
    return st.builds(
        lambda package, name, args, interface: ClassType(package, name, type_arguments=args, is_interface=interface),
        _PACKAGE,
        _IDENTIFIER,
        arguments,
        st.booleans(),
    )


def type_variables() -> st.SearchStrategy[TypeVariable]:
    """Return references to single-letter type parameters."""
    return st.builds(TypeVariable, st.sampled_from("TUVEKNS"))


def primitives() -> st.SearchStrategy[Primitive]:
    """Return primitive types."""
    return st.builds(Primitive, st.sampled_from(list(PrimitiveKind)))


def type_shapes() -> st.SearchStrategy[TypeShape]:
    """Return arbitrarily nested type shapes, including generic classes and arrays."""
    leaves: st.SearchStrategy[TypeShape] = st.one_of(primitives(), class_types(), type_variables())

    def extend(children: st.SearchStrategy[TypeShape]) -> st.SearchStrategy[TypeShape]:
        argument = st.one_of(
            children.filter(lambda shape: not isinstance(shape, Primitive)),
            st.just(unbounded()),
            children.filter(lambda shape: not isinstance(shape, Primitive)).map(upper_bounded),
            children.filter(lambda shape: not isinstance(shape, Primitive)).map(lower_bounded),
        )
        generic = st.builds(
            lambda base, args: base.with_arguments(*args),
            class_types(),
            st.lists(argument, min_size=1, max_size=3),
        )
        return st.one_of(children.map(ArrayType), generic)

    return st.recursive(leaves, extend, max_leaves=8)


def reference_shapes() -> st.SearchStrategy[TypeShape]:
    """Return type shapes that can carry a nullness marker."""
    return type_shapes().filter(lambda shape: not isinstance(shape, Primitive))
