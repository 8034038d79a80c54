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

"""Render type shapes and methods as JVM generic signatures.

The grammar follows the Java Virtual Machine Specification (4.7.9.1) with one
extension used by Eclipse external annotations: a nullness marker (``0`` for
nullable, ``1`` for non-null) may follow the ``L``, ``T`` or ``[`` token that
introduces an element. Only the element whose nullness was queried gets a
marker; nested elements (array components, type arguments and bounds) are
always rendered with ``Nullness.UNDEFINED``.

Every function here is pure: it returns a new string and never mutates shared
state, so renderings of the same input are always identical.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from eeaforge.compat import assert_never

from .errors import InvalidBoundsError, InvalidWildcardError, MissingBoundsError, SignatureError
from .nullness import Nullness
from .shapes import (
    ArrayType,
    ClassType,
    MethodContext,
    ParameterContext,
    Primitive,
    TypeVariable,
    Wildcard,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from eeaforge.nullability import NullabilityProvider

    from .shapes import (
        Bound,
        ClassDescription,
        MethodDescription,
        TypeArgument,
        TypeParameter,
        TypeShape,
    )


def type_signature(shape: TypeShape, nullness: Nullness = Nullness.UNDEFINED) -> str:
    """Render a Java type signature.

    Args:
        shape: Type shape to render.
        nullness: Nullness of the element itself; ignored for primitives.

    Returns:
        The signature text, e.g. ``L0java/lang/Object;`` or ``[TT;``.
    """
    match shape:
        case Primitive(kind=kind):
            return kind.descriptor
        case ArrayType(component=component):
            return f"[{nullness.marker}{type_signature(component)}"
        case ClassType():
            return _class_type_signature(shape, nullness)
        case TypeVariable(symbol=symbol):
            return f"T{nullness.marker}{symbol};"
        case _:
            assert_never(shape)


def _class_type_signature(shape: ClassType, nullness: Nullness) -> str:
    parts = ["L", nullness.marker]
    if shape.package:
        parts.append(shape.package.replace(".", "/") + "/")
    parts.extend(f"{_simple_class_type_signature(owner)}." for owner in shape.owners)
    parts.append(_simple_class_type_signature(shape))
    parts.append(";")
    return "".join(parts)


def _simple_class_type_signature(shape: ClassType) -> str:
    if not shape.type_arguments:
        return shape.simple_name
    return shape.simple_name + type_arguments_signature(shape.type_arguments)


def type_arguments_signature(type_arguments: Sequence[TypeArgument]) -> str:
    """Render a bracketed type argument list such as ``<Ljava/lang/String;*>``."""
    return "<" + "".join(type_argument_signature(argument) for argument in type_arguments) + ">"


def type_argument_signature(type_argument: TypeArgument) -> str:
    """Render a single type argument.

    Invariant arguments render as nested signatures. Wildcards render as
    ``*`` (unbounded or bounded by ``Object``), ``+sig`` (upper bounded) or
    ``-sig`` (lower bounded).

    Raises:
        InvalidWildcardError: If a wildcard has more than one upper bound, more
            than one lower bound, or a lower bound together with an upper
            bound other than ``Object``.
    """
    if not isinstance(type_argument, Wildcard):
        return type_signature(type_argument)
    upper = type_argument.upper_bounds
    lower = type_argument.lower_bounds
    if lower:
        if len(lower) > 1:
            msg = f"Lower bounded type argument '{describe_type(type_argument)}' cannot have more than one lower bound"
            raise InvalidWildcardError(type_argument, msg)
        if len(upper) > 1 or (upper and not _is_object(upper[0])):
            msg = f"Lower bounded type argument '{describe_type(type_argument)}' must have Object as upper bound"
            raise InvalidWildcardError(type_argument, msg)
        return "-" + type_signature(lower[0])
    if len(upper) > 1:
        msg = f"Upper bounded type argument '{describe_type(type_argument)}' cannot have more than one upper bound"
        raise InvalidWildcardError(type_argument, msg)
    if not upper or _is_object(upper[0]):
        return "*"
    return "+" + type_signature(upper[0])


def type_parameter_signature(type_parameter: TypeParameter) -> str:
    """Render a type parameter declaration such as ``S:Ljava/lang/Number;:Ljava/io/Serializable;``.

    A class bound is introduced by a single ``:``. When the first bound is an
    interface the class bound is empty, which doubles the leading colon.

    Raises:
        MissingBoundsError: If the type parameter has no bounds.
        InvalidBoundsError: If a bound after the first is not an interface.
    """
    bounds = type_parameter.bounds
    if not bounds:
        msg = f"Type parameter '{type_parameter.symbol}' must have upper bounds"
        raise MissingBoundsError(type_parameter, msg)
    for bound in bounds[1:]:
        if not _is_interface(bound):
            msg = (
                f"Type parameter '{describe_type_parameter(type_parameter)}' may only have "
                f"interface bounds after the first bound"
            )
            raise InvalidBoundsError(type_parameter, msg)
    lead = ":" if _is_interface(bounds[0]) else ""
    return type_parameter.symbol + lead + "".join(f":{type_signature(bound)}" for bound in bounds)


def type_parameters_signature(type_parameters: Sequence[TypeParameter]) -> str:
    """Render a bracketed type parameter list such as ``<T:Ljava/lang/Object;>``."""
    return "<" + "".join(type_parameter_signature(parameter) for parameter in type_parameters) + ">"


def method_signature(
    method: MethodDescription,
    nullability: NullabilityProvider,
    declaring_type: ClassDescription | None = None,
) -> str:
    """Render a method signature, asking ``nullability`` for parameter and return markers.

    Args:
        method: Method to render.
        nullability: Provider answering the nullness of each parameter and of
            the return value.
        declaring_type: Class declaring the method. Providers use it to find
            package-level defaults.

    Returns:
        The signature text, e.g. ``<O:Ljava/lang/Object;>(T0O;)T0O;``.

    Raises:
        SignatureError: If any part of the method cannot be rendered; the
            original error is chained as the cause.
    """
    context = MethodContext(declaring_type, method)
    try:
        head = type_parameters_signature(method.type_parameters) if method.type_parameters else ""
        parameters = "".join(
            type_signature(parameter.type, nullability.parameter_nullness(ParameterContext(context, parameter, index)))
            for index, parameter in enumerate(method.parameters)
        )
        return_part = type_signature(method.return_type, nullability.return_nullness(context))
    except SignatureError as exc:
        msg = f"Could not write method signature {describe_method(method, declaring_type)}"
        raise SignatureError(method, msg) from exc
    return f"{head}({parameters}){return_part}"


def _is_object(shape: TypeShape) -> bool:
    return isinstance(shape, ClassType) and shape.is_object


def _is_interface(bound: Bound) -> bool:
    return isinstance(bound, ClassType) and bound.is_interface


def describe_type(shape: TypeArgument) -> str:
    """Return Java source notation for a type shape or wildcard, for messages."""
    match shape:
        case Primitive(kind=kind):
            return kind.value
        case ArrayType(component=component):
            return describe_type(component) + "[]"
        case ClassType():
            segments = [*shape.owners, shape]
            text = ".".join(_describe_simple(segment) for segment in segments)
            return f"{shape.package}.{text}" if shape.package else text
        case TypeVariable(symbol=symbol):
            return symbol
        case Wildcard(upper_bounds=upper, lower_bounds=lower):
            text = "?"
            real_upper = [bound for bound in upper if not _is_object(bound)]
            if real_upper:
                text += " extends " + " & ".join(describe_type(bound) for bound in real_upper)
            if lower:
                text += " super " + " & ".join(describe_type(bound) for bound in lower)
            return text
        case _:
            assert_never(shape)


def _describe_simple(shape: ClassType) -> str:
    if not shape.type_arguments:
        return shape.simple_name
    return shape.simple_name + "<" + ", ".join(describe_type(argument) for argument in shape.type_arguments) + ">"


def describe_type_parameter(type_parameter: TypeParameter) -> str:
    """Return Java source notation for a type parameter declaration."""
    bounds = [bound for bound in type_parameter.bounds if not _is_object(bound)]
    if not bounds:
        return type_parameter.symbol
    return type_parameter.symbol + " extends " + " & ".join(describe_type(bound) for bound in bounds)


def describe_method(method: MethodDescription, declaring_type: ClassDescription | None = None) -> str:
    """Return a readable description of a method, e.g. ``java.util.List<E>.get(int)``."""
    owner = f"{declaring_type.name}." if declaring_type is not None else ""
    parameters = ", ".join(describe_type(parameter.type) for parameter in method.parameters)
    return f"{owner}{method.name}({parameters})"


class SignatureWriter:
    """Signature writer bound to one nullability provider.

    A thin convenience wrapper over the module-level rendering functions; it
    keeps no state besides the provider and may be reused for any number of
    renderings.
    """

    def __init__(self, nullability: NullabilityProvider) -> None:
        self._nullability = nullability

    @property
    def nullability(self) -> NullabilityProvider:
        """Provider used for parameter and return markers."""
        return self._nullability

    def method_signature(self, method: MethodDescription, declaring_type: ClassDescription | None = None) -> str:
        """Render ``method`` with this writer's provider."""
        return method_signature(method, self._nullability, declaring_type)

    @staticmethod
    def type_signature(shape: TypeShape, nullness: Nullness = Nullness.UNDEFINED) -> str:
        """Render a single type shape."""
        return type_signature(shape, nullness)

    @staticmethod
    def type_arguments_signature(type_arguments: Sequence[TypeArgument]) -> str:
        """Render a bracketed type argument list."""
        return type_arguments_signature(type_arguments)

    @staticmethod
    def type_parameters_signature(type_parameters: Sequence[TypeParameter]) -> str:
        """Render a bracketed type parameter list."""
        return type_parameters_signature(type_parameters)


__all__ = [
    "SignatureWriter",
    "describe_method",
    "describe_type",
    "describe_type_parameter",
    "method_signature",
    "type_argument_signature",
    "type_arguments_signature",
    "type_parameter_signature",
    "type_parameters_signature",
    "type_signature",
]
