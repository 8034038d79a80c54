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

"""Nullability providers used to place nullness markers in signatures.

A provider answers two questions: the nullness of a method parameter and the
nullness of a method's return value. The implementations form a fixed set:

- ``OmitNullability``: always ``Nullness.OMIT``; renders plain signatures.
- ``UndefinedNullability``: always ``Nullness.UNDEFINED``.
- ``ConstantNullability``: fixed answers, e.g. "parameters nullable by default".
- ``AnnotationNullability``: reads declared annotation names.
- ``CombinedNullability``: layers providers, later ones winning.

Layering uses ``Nullness.override``, so a provider that answers ``OMIT``
suppresses every provider layered after it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Final

from eeaforge.compat import override
from eeaforge.signatures.nullness import Nullness

if TYPE_CHECKING:
    from eeaforge.signatures.shapes import MethodContext, ParameterContext

JSR305_NULLABLE: Final[str] = "javax.annotation.Nullable"
JSR305_NONNULL: Final[str] = "javax.annotation.Nonnull"
JSR305_PARAMETERS_NONNULL_BY_DEFAULT: Final[str] = "javax.annotation.ParametersAreNonnullByDefault"


class NullabilityProvider(ABC):
    """Base class of all nullability providers."""

    @abstractmethod
    def parameter_nullness(self, parameter: ParameterContext) -> Nullness:
        """Return the nullness of a method parameter."""

    @abstractmethod
    def return_nullness(self, method: MethodContext) -> Nullness:
        """Return the nullness of a method's return value."""

    def override(self, other: NullabilityProvider) -> CombinedNullability:
        """Layer ``other`` on top of this provider.

        Args:
            other: Provider whose answers take precedence.

        Returns:
            A combined provider consulting this provider first and ``other`` last.
        """
        return CombinedNullability([self, other])


class OmitNullability(NullabilityProvider):
    """Provider that omits nullness for every element."""

    @override
    def parameter_nullness(self, parameter: ParameterContext) -> Nullness:
        return Nullness.OMIT

    @override
    def return_nullness(self, method: MethodContext) -> Nullness:
        return Nullness.OMIT

    @override
    def __repr__(self) -> str:
        return "OmitNullability()"


class UndefinedNullability(NullabilityProvider):
    """Provider with no opinion about any element."""

    @override
    def parameter_nullness(self, parameter: ParameterContext) -> Nullness:
        return Nullness.UNDEFINED

    @override
    def return_nullness(self, method: MethodContext) -> Nullness:
        return Nullness.UNDEFINED

    @override
    def __repr__(self) -> str:
        return "UndefinedNullability()"


_OMIT: Final[OmitNullability] = OmitNullability()
_UNDEFINED: Final[UndefinedNullability] = UndefinedNullability()


def omit() -> OmitNullability:
    """Return the shared provider that omits all nullness."""
    return _OMIT


def undefined() -> UndefinedNullability:
    """Return the shared provider that leaves all nullness undefined."""
    return _UNDEFINED


class ConstantNullability(NullabilityProvider):
    """Provider returning the same nullness regardless of the element.

    Used to model project-wide defaults such as "parameters are nullable
    unless annotated otherwise".
    """

    def __init__(self, parameter: Nullness, return_value: Nullness) -> None:
        self._parameter = parameter
        self._return_value = return_value

    @property
    def parameter(self) -> Nullness:
        """Nullness reported for every parameter."""
        return self._parameter

    @property
    def return_value(self) -> Nullness:
        """Nullness reported for every return value."""
        return self._return_value

    @override
    def parameter_nullness(self, parameter: ParameterContext) -> Nullness:
        return self._parameter

    @override
    def return_nullness(self, method: MethodContext) -> Nullness:
        return self._return_value

    @override
    def __repr__(self) -> str:
        return f"ConstantNullability(parameter={self._parameter.value!r}, return_value={self._return_value.value!r})"


class AnnotationNullability(NullabilityProvider):
    """Provider reading nullness from declared annotation names.

    Parameters start from a baseline: ``NONNULL`` when the package of the
    method's declaring type carries the "parameters non-null by default"
    annotation, ``parameter_default`` otherwise. Annotations declared on the
    parameter then override that baseline. Return values start from
    ``return_default`` and only consider annotations declared on the method.
    """

    def __init__(
        self,
        nullable: str,
        nonnull: str,
        parameters_nonnull_by_default: str,
        *,
        parameter_default: Nullness = Nullness.UNDEFINED,
        return_default: Nullness = Nullness.UNDEFINED,
    ) -> None:
        self._nullable = nullable
        self._nonnull = nonnull
        self._parameters_nonnull_by_default = parameters_nonnull_by_default
        self._parameter_default = parameter_default
        self._return_default = return_default

    @classmethod
    def jsr305(cls) -> AnnotationNullability:
        """Return a provider for the JSR-305 ``javax.annotation`` annotations."""
        return _JSR305

    @property
    def nullable(self) -> str:
        """Annotation name marking an element nullable."""
        return self._nullable

    @property
    def nonnull(self) -> str:
        """Annotation name marking an element non-null."""
        return self._nonnull

    @property
    def parameters_nonnull_by_default(self) -> str:
        """Package annotation name making parameters non-null by default."""
        return self._parameters_nonnull_by_default

    @property
    def parameter_default(self) -> Nullness:
        """Parameter nullness used when neither the package nor the parameter decides."""
        return self._parameter_default

    @property
    def return_default(self) -> Nullness:
        """Return nullness used when the method declares no marker."""
        return self._return_default

    @override
    def parameter_nullness(self, parameter: ParameterContext) -> Nullness:
        declared = self._annotated_nullness(parameter.parameter.annotations)
        if declared is not Nullness.UNDEFINED:
            return declared
        declaring_type = parameter.method.declaring_type
        package_annotations = declaring_type.declaring_package.annotations if declaring_type is not None else ()
        if self._parameters_nonnull_by_default in package_annotations:
            return Nullness.NONNULL
        return self._parameter_default

    @override
    def return_nullness(self, method: MethodContext) -> Nullness:
        declared = self._annotated_nullness(method.method.annotations)
        if declared is not Nullness.UNDEFINED:
            return declared
        return self._return_default

    def _annotated_nullness(self, annotations: Iterable[str]) -> Nullness:
        nullness = Nullness.UNDEFINED
        for annotation in annotations:
            if annotation == self._nullable:
                nullness = Nullness.NULLABLE
            elif annotation == self._nonnull:
                nullness = Nullness.NONNULL
        return nullness

    @override
    def __repr__(self) -> str:
        return (
            f"AnnotationNullability(nullable={self._nullable!r}, nonnull={self._nonnull!r}, "
            f"parameters_nonnull_by_default={self._parameters_nonnull_by_default!r}, "
            f"parameter_default={self._parameter_default.value!r}, return_default={self._return_default.value!r})"
        )


_JSR305: Final[AnnotationNullability] = AnnotationNullability(
    JSR305_NULLABLE,
    JSR305_NONNULL,
    JSR305_PARAMETERS_NONNULL_BY_DEFAULT,
)


class CombinedNullability(NullabilityProvider):
    """Provider layering other providers from left to right.

    Each answer is folded into ``Nullness.UNDEFINED`` with
    ``Nullness.override``: later providers win, unless an earlier provider
    answered ``OMIT``.
    """

    def __init__(self, providers: Iterable[NullabilityProvider]) -> None:
        self._providers = tuple(providers)

    @property
    def providers(self) -> tuple[NullabilityProvider, ...]:
        """Layered providers, lowest precedence first."""
        return self._providers

    @override
    def parameter_nullness(self, parameter: ParameterContext) -> Nullness:
        nullness = Nullness.UNDEFINED
        for provider in self._providers:
            nullness = nullness.override(provider.parameter_nullness(parameter))
        return nullness

    @override
    def return_nullness(self, method: MethodContext) -> Nullness:
        nullness = Nullness.UNDEFINED
        for provider in self._providers:
            nullness = nullness.override(provider.return_nullness(method))
        return nullness

    @override
    def __repr__(self) -> str:
        return f"CombinedNullability({list(self._providers)!r})"

    # Defined last: the method name shadows the decorator in the class body.
    @override
    def override(self, other: NullabilityProvider) -> CombinedNullability:
        return CombinedNullability([*self._providers, other])


__all__ = [
    "JSR305_NONNULL",
    "JSR305_NULLABLE",
    "JSR305_PARAMETERS_NONNULL_BY_DEFAULT",
    "AnnotationNullability",
    "CombinedNullability",
    "ConstantNullability",
    "NullabilityProvider",
    "OmitNullability",
    "UndefinedNullability",
    "omit",
    "undefined",
]
