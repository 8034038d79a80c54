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


"""Class descriptions and type-model payloads shared across tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final

from eeaforge.nullability import AnnotationNullability
from eeaforge.signatures.shapes import (
    OBJECT,
    VOID,
    ArrayType,
    ClassDescription,
    ClassType,
    MethodDescription,
    PackageDescription,
    ParameterDescription,
    Primitive,
    PrimitiveKind,
    TypeParameter,
    TypeVariable,
    lower_bounded,
    unbounded,
    upper_bounded,
)

if TYPE_CHECKING:
    from pathlib import Path

    from eeaforge.signatures.shapes import TypeShape

FIXTURE_PACKAGE: Final[str] = "com.example.fixtures"
MAYBE_NIL: Final[str] = f"{FIXTURE_PACKAGE}.MaybeNil"
NEVER_NIL: Final[str] = f"{FIXTURE_PACKAGE}.NeverNil"
PARAMETERS_ARE_NEVER_NIL_BY_DEFAULT: Final[str] = f"{FIXTURE_PACKAGE}.ParametersAreNeverNilByDefault"

INT: Final[Primitive] = Primitive(PrimitiveKind.INT)
STRING: Final[ClassType] = ClassType.of("java.lang.String")
NUMBER: Final[ClassType] = ClassType.of("java.lang.Number")
SERIALIZABLE: Final[ClassType] = ClassType.of("java.io.Serializable", is_interface=True)
APPENDABLE: Final[ClassType] = ClassType.of("java.lang.Appendable", is_interface=True)
LIST: Final[ClassType] = ClassType.of("java.util.List", is_interface=True)
COMPARATOR: Final[ClassType] = ClassType.of("java.util.Comparator", is_interface=True)

GENERIC_TEST: Final[str] = f"{FIXTURE_PACKAGE}.GenericTest"
NESTED_GENERIC_TEST: Final[str] = f"{GENERIC_TEST}$NestedGenericTest"

__all__ = [
    "FIXTURE_PACKAGE",
    "GENERIC_TEST",
    "MAYBE_NIL",
    "NESTED_GENERIC_TEST",
    "NEVER_NIL",
    "PARAMETERS_ARE_NEVER_NIL_BY_DEFAULT",
    "build_fixture_class",
    "build_generic_class",
    "build_nested_generic_class",
    "build_type_model_payload",
    "fixture_nullability",
    "single_parameter_method",
    "write_type_model",
]


def fixture_nullability() -> AnnotationNullability:
    """Return the provider reading the fixture annotations."""
    return AnnotationNullability(MAYBE_NIL, NEVER_NIL, PARAMETERS_ARE_NEVER_NIL_BY_DEFAULT)


def single_parameter_method(
    name: str,
    shape: TypeShape,
    annotation: str | None = None,
    *type_parameters: TypeParameter,
) -> MethodDescription:
    """Build ``shape name(shape parameter)`` with the same annotation on parameter and return."""
    annotations = (annotation,) if annotation is not None and not isinstance(shape, Primitive) else ()
    return MethodDescription(
        name=name,
        type_parameters=tuple(type_parameters),
        parameters=(ParameterDescription("parameter", shape, annotations),),
        return_type=shape,
        annotations=annotations,
    )


def _fixture_methods(annotation: str | None) -> tuple[MethodDescription, ...]:
    o, a, n, s = (TypeVariable(symbol) for symbol in ("O", "A", "N", "S"))
    return (
        MethodDescription("method", return_type=VOID),
        single_parameter_method("methodWithIntParameter", INT, annotation),
        single_parameter_method("methodWithParameter", OBJECT, annotation),
        single_parameter_method("methodWithArrayParameter", ArrayType(STRING), annotation),
        single_parameter_method("methodWithGenericParameter", LIST.with_arguments(STRING), annotation),
        single_parameter_method("methodWithWildcardParameter", LIST.with_arguments(unbounded()), annotation),
        single_parameter_method(
            "methodWithUpperBoundedParameter",
            LIST.with_arguments(upper_bounded(SERIALIZABLE)),
            annotation,
        ),
        single_parameter_method(
            "methodWithLowerBoundedParameter",
            COMPARATOR.with_arguments(lower_bounded(STRING)),
            annotation,
        ),
        single_parameter_method("genericMethod", o, annotation, TypeParameter("O")),
        single_parameter_method("genericArrayMethod", ArrayType(a), annotation, TypeParameter("A")),
        single_parameter_method("genericMethodWithUpperClassBound", n, annotation, TypeParameter("N", (NUMBER,))),
        single_parameter_method(
            "genericMethodWithUpperInterfaceBound",
            s,
            annotation,
            TypeParameter("S", (SERIALIZABLE,)),
        ),
        single_parameter_method(
            "genericMethodWithUpperClassAndInterfaceBound",
            s,
            annotation,
            TypeParameter("S", (NUMBER, SERIALIZABLE)),
        ),
        single_parameter_method(
            "genericMethodWithTwoUpperInterfaceBounds",
            s,
            annotation,
            TypeParameter("S", (SERIALIZABLE, APPENDABLE)),
        ),
    )


def build_fixture_class(
    simple_name: str = "Test",
    annotation: str | None = None,
    *,
    package_annotations: tuple[str, ...] = (),
) -> ClassDescription:
    """Build a non-generic fixture class exercising every signature shape.

    Args:
        simple_name: Simple class name inside the fixture package.
        annotation: Annotation placed on every reference parameter and return
            value, or ``None`` for an unannotated class.
        package_annotations: Annotations declared on the fixture package.

    Returns:
        The class description.
    """
    return ClassDescription(
        type=ClassType.of(f"{FIXTURE_PACKAGE}.{simple_name}"),
        package=PackageDescription(FIXTURE_PACKAGE, package_annotations),
        methods=_fixture_methods(annotation),
    )


def _nested_generic_type() -> ClassType:
    owner = ClassType.of(GENERIC_TEST, TypeVariable("T"))
    return ClassType.of(NESTED_GENERIC_TEST, TypeVariable("U"), owner=owner)


def build_generic_class(simple_name: str = "GenericTest", annotation: str | None = None) -> ClassDescription:
    """Build ``simple_name<T> implements Comparator<T>`` with the fixture methods."""
    t = TypeVariable("T")
    nested = _nested_generic_type()
    methods = (
        *_fixture_methods(annotation),
        single_parameter_method("methodWithVariableParameter", t, annotation),
        single_parameter_method("methodWithNestedGenericParameter", nested, annotation, TypeParameter("U")),
    )
    return ClassDescription(
        type=ClassType.of(f"{FIXTURE_PACKAGE}.{simple_name}"),
        type_parameters=(TypeParameter("T"),),
        interfaces=(COMPARATOR.with_arguments(t),),
        methods=methods,
    )


def build_nested_generic_class(annotation: str | None = None) -> ClassDescription:
    """Build ``GenericTest<T>.NestedGenericTest<U>`` with one two-parameter method."""
    annotations = (annotation,) if annotation is not None else ()
    method = MethodDescription(
        name="methodWithVariableParameter",
        parameters=(
            ParameterDescription("parameter", TypeVariable("T"), annotations),
            ParameterDescription("parameter2", TypeVariable("U"), annotations),
        ),
        return_type=TypeVariable("U"),
        annotations=annotations,
    )
    return ClassDescription(
        type=ClassType.of(NESTED_GENERIC_TEST),
        type_parameters=(TypeParameter("U"),),
        methods=(method,),
    )


def build_type_model_payload(
    nullable: str = "javax.annotation.Nullable",
    nonnull_by_default: str = "javax.annotation.ParametersAreNonnullByDefault",
) -> dict[str, Any]:
    """Return a small type-model document with one annotated and one plain class."""
    return {
        "version": 1,
        "packages": {
            "com.example.safe": {"annotations": [nonnull_by_default]},
        },
        "classes": [
            {
                "name": "com.example.api.Repository",
                "methods": [
                    {
                        "name": "find",
                        "parameters": [{"name": "id", "type": "java.lang.String"}],
                        "returnType": "java.lang.Object",
                        "annotations": [nullable],
                    },
                    {"name": "size", "returnType": "int"},
                ],
            },
            {
                "name": "com.example.api.Plain",
                "methods": [
                    {
                        "name": "echo",
                        "parameters": [{"type": "java.lang.String"}],
                        "returnType": "java.lang.String",
                    },
                ],
            },
            {
                "name": "com.example.safe.Service",
                "methods": [
                    {
                        "name": "handle",
                        "parameters": [{"name": "request", "type": "java.lang.Object"}],
                    },
                ],
            },
        ],
    }


def write_type_model(path: Path, payload: dict[str, Any] | None = None) -> Path:
    """Write ``payload`` (or the default document) as JSON to ``path``."""
    _ = path.write_text(json.dumps(payload or build_type_model_payload()), encoding="utf-8")
    return path
