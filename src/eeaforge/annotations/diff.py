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

"""Build external annotation records by diffing plain and annotated signatures.

Every element of a class is rendered twice: once with the omitting provider
(the *plain* signature) and once with the configured provider (the
*annotated* signature). A record body follows the Eclipse ``.eea`` layout::

    class <internal-name>
    <type-parameters plain>
    <type-parameters annotated>
    super <internal-name>
    <type-arguments plain>
    <type-arguments annotated>
    <method-name>
     <plain-signature>
     <annotated-signature>

Type parameter and type argument lines appear only when the class or
supertype is generic. Method records appear only when the two renderings of
the method differ.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from eeaforge._internal.logging_utils import structured_extra
from eeaforge.core.model_types import LogComponent
from eeaforge.nullability import NullabilityProvider, omit
from eeaforge.signatures.errors import SignatureError
from eeaforge.signatures.writer import SignatureWriter

from .errors import ClassAnnotationError, MethodAnnotationError

if TYPE_CHECKING:
    from eeaforge.signatures.shapes import ClassDescription, ClassType, MethodDescription

logger: logging.Logger = logging.getLogger("eeaforge.diff")

ErrorSink = Callable[[MethodAnnotationError], None]

EEA_SUFFIX: Final[str] = ".eea"


@dataclass(slots=True, frozen=True)
class AnnotationRecord:
    """Result of diffing one class.

    Attributes:
        type_name: Binary name of the class.
        internal_name: Internal (slash-separated) name of the class.
        annotated: Whether any element of the class differs between the plain
            and annotated renderings.
        body: Full ``.eea`` text; only meaningful when ``annotated``.
        method_count: Number of method records written to ``body``.
        error_count: Number of methods skipped because they failed to render.
    """

    type_name: str
    internal_name: str
    annotated: bool
    body: str
    method_count: int = 0
    error_count: int = 0

    @property
    def entry_name(self) -> str:
        """Archive entry name, e.g. ``java/util/List.eea``."""
        return self.internal_name + EEA_SUFFIX


class AnnotationDiffEngine:
    """Diff classes against a nullability provider.

    The engine holds two signature writers, one bound to the omitting
    provider and one bound to ``nullability``. It keeps no other state and can
    diff any number of classes.
    """

    def __init__(self, nullability: NullabilityProvider) -> None:
        self._plain = SignatureWriter(omit())
        self._annotated = SignatureWriter(nullability)

    @property
    def nullability(self) -> NullabilityProvider:
        """Provider used for the annotated renderings."""
        return self._annotated.nullability

    def diff(self, cls: ClassDescription, on_error: ErrorSink | None = None) -> AnnotationRecord:
        """Build the annotation record for ``cls``.

        Args:
            cls: Class to diff.
            on_error: Receives a ``MethodAnnotationError`` for every method that
                cannot be rendered. Failed methods are skipped either way.

        Returns:
            The annotation record of the class.

        Raises:
            ClassAnnotationError: If the class header or a supertype cannot be
                rendered.
        """
        lines: list[str] = []
        try:
            annotated = self._append_header(lines, cls)
            if cls.superclass is not None and not cls.superclass.is_object:
                annotated = self._append_supertype(lines, cls.superclass) or annotated
            for interface in cls.interfaces:
                annotated = self._append_supertype(lines, interface) or annotated
        except SignatureError as exc:
            raise ClassAnnotationError(cls.name) from exc

        method_count = 0
        error_count = 0
        for method in cls.methods:
            try:
                written = self._append_method(lines, cls, method)
            except Exception as exc:  # ignore JUSTIFIED: one broken method must not drop the rest of the class
                error_count += 1
                error = MethodAnnotationError(cls.name, method.name, str(exc))
                error.__cause__ = exc
                self._report(error, on_error)
                continue
            if written:
                method_count += 1

        annotated = annotated or method_count > 0
        logger.debug(
            "Diffed %s: %d annotated method(s), %d error(s)",
            cls.name,
            method_count,
            error_count,
            extra=structured_extra(
                component=LogComponent.DIFF,
                type_name=cls.name,
                annotated=annotated,
                counts={"methods": method_count, "errors": error_count},
            ),
        )
        return AnnotationRecord(
            type_name=cls.name,
            internal_name=cls.internal_name,
            annotated=annotated,
            body="".join(f"{line}\n" for line in lines),
            method_count=method_count,
            error_count=error_count,
        )

    def _append_header(self, lines: list[str], cls: ClassDescription) -> bool:
        lines.append(f"class {cls.internal_name}")
        if not cls.type_parameters:
            return False
        plain = self._plain.type_parameters_signature(cls.type_parameters)
        annotated = self._annotated.type_parameters_signature(cls.type_parameters)
        lines.extend((plain, annotated))
        return plain != annotated

    def _append_supertype(self, lines: list[str], supertype: ClassType) -> bool:
        lines.append(f"super {supertype.internal_name}")
        if not supertype.type_arguments:
            return False
        plain = self._plain.type_arguments_signature(supertype.type_arguments)
        annotated = self._annotated.type_arguments_signature(supertype.type_arguments)
        lines.extend((plain, annotated))
        return plain != annotated

    def _append_method(self, lines: list[str], cls: ClassDescription, method: MethodDescription) -> bool:
        plain = self._plain.method_signature(method, cls)
        annotated = self._annotated.method_signature(method, cls)
        if plain == annotated:
            return False
        lines.extend((method.name, f" {plain}", f" {annotated}"))
        return True

    @staticmethod
    def _report(error: MethodAnnotationError, on_error: ErrorSink | None) -> None:
        if on_error is not None:
            on_error(error)
            return
        logger.debug(
            "%s",
            error,
            extra=structured_extra(
                component=LogComponent.DIFF,
                type_name=error.type_name,
                method=error.method_name,
            ),
        )


__all__ = ["EEA_SUFFIX", "AnnotationDiffEngine", "AnnotationRecord", "ErrorSink"]
