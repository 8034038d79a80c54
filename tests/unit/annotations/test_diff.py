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


"""Unit tests for the annotation diff engine."""

from __future__ import annotations

import logging

import pytest

from eeaforge.annotations import AnnotationDiffEngine, ClassAnnotationError, MethodAnnotationError
from eeaforge.nullability import AnnotationNullability, omit
from eeaforge.signatures import (
    ClassDescription,
    ClassType,
    InvalidWildcardError,
    MethodDescription,
    MissingBoundsError,
    ParameterDescription,
    SignatureError,
    TypeParameter,
    Wildcard,
)
from tests.fixtures.builders import (
    FIXTURE_PACKAGE,
    LIST,
    MAYBE_NIL,
    NUMBER,
    PARAMETERS_ARE_NEVER_NIL_BY_DEFAULT,
    SERIALIZABLE,
    STRING,
    build_fixture_class,
    build_generic_class,
    single_parameter_method,
)

pytestmark = pytest.mark.unit

BROKEN_ARGUMENT = LIST.with_arguments(Wildcard(upper_bounds=(SERIALIZABLE, NUMBER)))


def test_unannotated_class_produces_header_only(
    plain_class: ClassDescription,
    annotated: AnnotationNullability,
) -> None:
    record = AnnotationDiffEngine(annotated).diff(plain_class)

    assert not record.annotated
    assert record.body == f"class {FIXTURE_PACKAGE.replace('.', '/')}/Test\n"
    assert record.method_count == 0
    assert record.error_count == 0


def test_annotated_class_lists_differing_methods(
    nullable_class: ClassDescription,
    annotated: AnnotationNullability,
) -> None:
    record = AnnotationDiffEngine(annotated).diff(nullable_class)

    assert record.annotated
    assert record.type_name == "com.example.fixtures.NullableTest"
    assert record.entry_name == "com/example/fixtures/NullableTest.eea"
    assert record.body.startswith("class com/example/fixtures/NullableTest\n")
    assert (
        "methodWithParameter\n (Ljava/lang/Object;)Ljava/lang/Object;\n (L0java/lang/Object;)L0java/lang/Object;\n"
        in record.body
    )
    assert "\nmethod\n" not in record.body
    assert "methodWithIntParameter" not in record.body
    assert record.method_count == 12


def test_generic_class_writes_type_parameter_and_supertype_lines() -> None:
    cls = build_generic_class("NullableGenericTest", MAYBE_NIL)
    record = AnnotationDiffEngine(AnnotationNullability(MAYBE_NIL, "x.NonNull", "x.Default")).diff(cls)
    lines = record.body.splitlines()

    assert lines[:6] == [
        "class com/example/fixtures/NullableGenericTest",
        "<T:Ljava/lang/Object;>",
        "<T:Ljava/lang/Object;>",
        "super java/util/Comparator",
        "<TT;>",
        "<TT;>",
    ]
    assert "methodWithVariableParameter" in lines
    assert record.body.endswith("\n")


def test_non_object_superclass_gets_a_super_record(annotated: AnnotationNullability) -> None:
    cls = ClassDescription(
        type=ClassType.of("com.example.Names"),
        superclass=ClassType.of("com.example.Base", STRING),
    )

    record = AnnotationDiffEngine(annotated).diff(cls)

    assert record.body == (
        "class com/example/Names\nsuper com/example/Base\n<Ljava/lang/String;>\n<Ljava/lang/String;>\n"
    )
    assert not record.annotated


def test_interface_without_type_arguments_has_bare_super_line(annotated: AnnotationNullability) -> None:
    cls = ClassDescription(type=ClassType.of("com.example.Token"), interfaces=(SERIALIZABLE,))

    assert AnnotationDiffEngine(annotated).diff(cls).body == (
        "class com/example/Token\nsuper java/io/Serializable\n"
    )


def test_package_default_annotates_parameters(annotated: AnnotationNullability) -> None:
    cls = build_fixture_class("Defaults", package_annotations=(PARAMETERS_ARE_NEVER_NIL_BY_DEFAULT,))

    record = AnnotationDiffEngine(annotated).diff(cls)

    assert record.annotated
    assert (
        "methodWithParameter\n (Ljava/lang/Object;)Ljava/lang/Object;\n (L1java/lang/Object;)Ljava/lang/Object;\n"
        in record.body
    )


def test_omitting_provider_never_annotates(nullable_class: ClassDescription) -> None:
    assert not AnnotationDiffEngine(omit()).diff(nullable_class).annotated


def test_broken_method_is_reported_and_skipped(annotated: AnnotationNullability) -> None:
    cls = ClassDescription(
        type=ClassType.of("com.example.Mixed"),
        methods=(
            MethodDescription("broken", parameters=(ParameterDescription("values", BROKEN_ARGUMENT),)),
            single_parameter_method("good", STRING, MAYBE_NIL),
        ),
    )
    errors: list[MethodAnnotationError] = []

    record = AnnotationDiffEngine(annotated).diff(cls, errors.append)

    assert record.annotated
    assert record.error_count == 1
    assert record.method_count == 1
    assert "broken" not in record.body
    assert "good\n" in record.body
    assert len(errors) == 1
    error = errors[0]
    assert (error.type_name, error.method_name) == ("com.example.Mixed", "broken")
    assert str(error).startswith("Could not write external annotations for method com.example.Mixed.broken: ")
    assert isinstance(error.__cause__, SignatureError)
    assert isinstance(error.__cause__.__cause__, InvalidWildcardError)


def test_broken_method_without_sink_is_logged(
    annotated: AnnotationNullability,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging.getLogger("eeaforge"), "propagate", True)
    cls = ClassDescription(
        type=ClassType.of("com.example.Mixed"),
        methods=(MethodDescription("broken", parameters=(ParameterDescription("values", BROKEN_ARGUMENT),)),),
    )

    with caplog.at_level(logging.DEBUG, logger="eeaforge.diff"):
        record = AnnotationDiffEngine(annotated).diff(cls)

    assert record.error_count == 1
    assert not record.annotated
    assert any("com.example.Mixed.broken" in message for message in caplog.messages)


def test_class_with_invalid_type_parameters_fails(annotated: AnnotationNullability) -> None:
    cls = ClassDescription(type=ClassType.of("com.example.Broken"), type_parameters=(TypeParameter("T", ()),))

    expected = r"Could not write external annotations for com\.example\.Broken"

    with pytest.raises(ClassAnnotationError, match=expected) as excinfo:
        _ = AnnotationDiffEngine(annotated).diff(cls)

    assert excinfo.value.type_name == "com.example.Broken"
    assert isinstance(excinfo.value.__cause__, MissingBoundsError)


def test_class_with_invalid_supertype_arguments_fails(annotated: AnnotationNullability) -> None:
    cls = ClassDescription(type=ClassType.of("com.example.Broken"), interfaces=(BROKEN_ARGUMENT,))

    with pytest.raises(ClassAnnotationError):
        _ = AnnotationDiffEngine(annotated).diff(cls)


def test_engine_exposes_its_provider(annotated: AnnotationNullability) -> None:
    assert AnnotationDiffEngine(annotated).nullability is annotated
