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

"""Structural type model consumed by the signature writer.

The model is a read-only object graph describing packages, classes, methods
and generic type shapes, as resolved from compiled type metadata. Every type is
an immutable dataclass so a graph can be shared freely between renderings.

Type shapes form a closed union:

- ``Primitive``: a JVM base type (``int``, ``void``, ...).
- ``ArrayType``: an array of another shape.
- ``ClassType``: a class or interface reference, optionally parameterized and
  optionally nested in (generic) owner types.
- ``TypeVariable``: a reference to a declared type parameter.

Type arguments additionally allow ``Wildcard``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final, TypeAlias

from eeaforge.compat import StrEnum

JAVA_LANG: Final[str] = "java.lang"


class PrimitiveKind(StrEnum):
    """Java primitive keywords and their JVM descriptors."""

    VOID = "void"
    BOOLEAN = "boolean"
    BYTE = "byte"
    CHAR = "char"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def descriptor(self) -> str:
        """Return the single-letter JVM descriptor."""
        return _DESCRIPTORS[self]

    @classmethod
    def from_str(cls, raw: str) -> PrimitiveKind:
        """Create a PrimitiveKind from a Java keyword.

        Args:
            raw: Primitive keyword such as ``"int"``.

        Returns:
            PrimitiveKind enum value.

        Raises:
            ValueError: If the keyword is not a Java primitive.
        """
        value = raw.strip()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown primitive type '{raw}'"
            raise ValueError(msg) from exc


_DESCRIPTORS: Final[dict[PrimitiveKind, str]] = {
    PrimitiveKind.VOID: "V",
    PrimitiveKind.BOOLEAN: "Z",
    PrimitiveKind.BYTE: "B",
    PrimitiveKind.CHAR: "C",
    PrimitiveKind.SHORT: "S",
    PrimitiveKind.INT: "I",
    PrimitiveKind.LONG: "J",
    PrimitiveKind.FLOAT: "F",
    PrimitiveKind.DOUBLE: "D",
}


@dataclass(frozen=True, slots=True)
class Primitive:
    """A primitive type. Never carries a nullness marker."""

    kind: PrimitiveKind


@dataclass(frozen=True, slots=True)
class ArrayType:
    """An array whose elements have the ``component`` shape."""

    component: TypeShape


@dataclass(frozen=True, slots=True)
class ClassType:
    """A class or interface reference.

    Attributes:
        package: Dotted package name, empty for the unnamed package.
        simple_name: Simple name of the referenced type.
        owners: Enclosing types, outermost first. Owners may carry their own
            type arguments (``Outer<T>.Inner<U>``).
        type_arguments: Type arguments of this type, empty when not parameterized.
        is_interface: Whether the referenced type is an interface.
    """

    package: str
    simple_name: str
    owners: tuple[ClassType, ...] = ()
    type_arguments: tuple[TypeArgument, ...] = ()
    is_interface: bool = False

    @property
    def name(self) -> str:
        """Binary name, e.g. ``java.util.Map$Entry``."""
        nested = "$".join([*(owner.simple_name for owner in self.owners), self.simple_name])
        return f"{self.package}.{nested}" if self.package else nested

    @property
    def internal_name(self) -> str:
        """Internal name, e.g. ``java/util/Map$Entry``."""
        return self.name.replace(".", "/")

    @property
    def is_object(self) -> bool:
        """Whether this is the universal root type ``java.lang.Object``."""
        return self.package == JAVA_LANG and self.simple_name == "Object" and not self.owners

    def with_arguments(self, *type_arguments: TypeArgument) -> ClassType:
        """Return a copy of this type parameterized with ``type_arguments``."""
        return replace(self, type_arguments=tuple(type_arguments))

    @classmethod
    def of(
        cls,
        name: str,
        *type_arguments: TypeArgument,
        is_interface: bool = False,
        owner: ClassType | None = None,
    ) -> ClassType:
        """Build a class type from a binary name.

        Nested names (``Outer$Inner``) get a non-generic owner chain unless an
        explicit ``owner`` is supplied, in which case that owner (and its own
        chain) is used instead.

        Args:
            name: Binary class name such as ``java.util.Map$Entry``.
            *type_arguments: Type arguments of the referenced type.
            is_interface: Whether the referenced type is an interface.
            owner: Explicit, possibly parameterized, directly enclosing type.

        Returns:
            The class type reference.
        """
        package, _, nested = name.rpartition(".")
        segments = nested.split("$")
        if owner is not None:
            owners = (*owner.owners, owner)
        else:
            chain: list[ClassType] = []
            for segment in segments[:-1]:
                chain.append(cls(package, segment, owners=tuple(chain)))
            owners = tuple(chain)
        return cls(
            package,
            segments[-1],
            owners=owners,
            type_arguments=tuple(type_arguments),
            is_interface=is_interface,
        )


@dataclass(frozen=True, slots=True)
class TypeVariable:
    """A reference to a type parameter by its symbol."""

    symbol: str


OBJECT: Final[ClassType] = ClassType(JAVA_LANG, "Object")


@dataclass(frozen=True, slots=True)
class Wildcard:
    """A wildcard type argument (``?``, ``? extends T``, ``? super T``).

    The general form can hold any bound combination; only the three valid
    forms built by ``unbounded``, ``upper_bounded`` and ``lower_bounded`` can
    be rendered.
    """

    upper_bounds: tuple[TypeShape, ...] = (OBJECT,)
    lower_bounds: tuple[TypeShape, ...] = ()


TypeShape: TypeAlias = Primitive | ArrayType | ClassType | TypeVariable
TypeArgument: TypeAlias = TypeShape | Wildcard
Bound: TypeAlias = ClassType | TypeVariable

VOID: Final[Primitive] = Primitive(PrimitiveKind.VOID)


def unbounded() -> Wildcard:
    """Return the unbounded wildcard ``?``."""
    return Wildcard()


def upper_bounded(bound: TypeShape) -> Wildcard:
    """Return ``? extends bound``."""
    return Wildcard(upper_bounds=(bound,))


def lower_bounded(bound: TypeShape) -> Wildcard:
    """Return ``? super bound``."""
    return Wildcard(upper_bounds=(OBJECT,), lower_bounds=(bound,))


@dataclass(frozen=True, slots=True)
class TypeParameter:
    """A type parameter declaration with its ordered upper bounds."""

    symbol: str
    bounds: tuple[Bound, ...] = (OBJECT,)


@dataclass(frozen=True, slots=True)
class PackageDescription:
    """A package and the annotation names declared on it."""

    name: str
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ParameterDescription:
    """A method parameter."""

    name: str
    type: TypeShape
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class MethodDescription:
    """A declared method.

    Attributes:
        name: Method name (``<init>`` for constructors).
        type_parameters: Declared method type parameters, in order.
        parameters: Parameters, in order.
        return_type: Return type shape.
        annotations: Annotation names declared on the method; they describe
            the return value.
    """

    name: str
    type_parameters: tuple[TypeParameter, ...] = ()
    parameters: tuple[ParameterDescription, ...] = ()
    return_type: TypeShape = VOID
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ClassDescription:
    """A class as exposed by the metadata collaborator.

    Attributes:
        type: Reference to the class itself (without type arguments).
        package: Declaring package; derived from ``type`` when omitted.
        type_parameters: Declared class type parameters, in order.
        superclass: Direct superclass, ``None`` for interfaces and the root type.
        interfaces: Directly implemented or extended interfaces, in order.
        methods: Declared methods, in metadata order.
        annotations: Annotation names declared on the class.
    """

    type: ClassType
    package: PackageDescription | None = None
    type_parameters: tuple[TypeParameter, ...] = ()
    superclass: ClassType | None = OBJECT
    interfaces: tuple[ClassType, ...] = ()
    methods: tuple[MethodDescription, ...] = ()
    annotations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Derive the declaring package from the class type when omitted."""
        if self.package is None:
            object.__setattr__(self, "package", PackageDescription(self.type.package))

    @property
    def name(self) -> str:
        """Binary name of the class."""
        return self.type.name

    @property
    def internal_name(self) -> str:
        """Internal (slash-separated) name of the class."""
        return self.type.internal_name

    @property
    def declaring_package(self) -> PackageDescription:
        """Declaring package, never ``None`` after initialisation."""
        return self.package or PackageDescription(self.type.package)


@dataclass(frozen=True, slots=True)
class MethodContext:
    """A method together with the class that declares it, when known."""

    declaring_type: ClassDescription | None
    method: MethodDescription


@dataclass(frozen=True, slots=True)
class ParameterContext:
    """A parameter together with its declaring method and position."""

    method: MethodContext
    parameter: ParameterDescription
    index: int


__all__ = [
    "OBJECT",
    "VOID",
    "ArrayType",
    "Bound",
    "ClassDescription",
    "ClassType",
    "MethodContext",
    "MethodDescription",
    "PackageDescription",
    "ParameterContext",
    "ParameterDescription",
    "Primitive",
    "PrimitiveKind",
    "TypeArgument",
    "TypeParameter",
    "TypeShape",
    "TypeVariable",
    "Wildcard",
    "lower_bounded",
    "unbounded",
    "upper_bounded",
]
