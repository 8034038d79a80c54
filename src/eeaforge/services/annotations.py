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

"""Create annotation archives from type models.

One archive is written per type-model file. Each archive is first written to
a temporary file next to its destination and moved into place only when it
holds at least one annotated class; otherwise an empty destination file is
written, so build tools can still treat the archive as an up-to-date output.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from eeaforge._internal.error_codes import error_code_for
from eeaforge._internal.exceptions import format_causal_chain
from eeaforge._internal.logging_utils import structured_extra
from eeaforge.annotations import (
    AnnotationArchiveWriter,
    AnnotationDiffEngine,
    ArchiveWriteError,
    ClassAnnotationError,
    MethodAnnotationError,
)
from eeaforge.config.constants import DEFAULT_ARCHIVE_SUFFIX
from eeaforge.core.model_types import LogComponent
from eeaforge.metadata import load_type_model
from eeaforge.nullability import AnnotationNullability, NullabilityProvider

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from eeaforge.config.models import NullabilitySettings
    from eeaforge.signatures.shapes import ClassDescription

logger: logging.Logger = logging.getLogger("eeaforge.services")

TEMP_PREFIX = ".eeaforge-"


@dataclass(slots=True, frozen=True)
class ArchiveResult:
    """Outcome of writing one annotation archive.

    Attributes:
        path: Destination archive path.
        annotated: Whether any class was annotated. When ``False`` the
            destination is an empty file.
        classes_total: Number of classes processed.
        classes_annotated: Number of classes written to the archive.
        entries: Archive entry names, in write order.
        method_errors: Distinct messages of methods that could not be rendered.
        class_errors: Messages of classes that could not be rendered.
    """

    path: Path
    annotated: bool
    classes_total: int
    classes_annotated: int
    entries: tuple[str, ...] = ()
    method_errors: tuple[str, ...] = ()
    class_errors: tuple[str, ...] = ()

    @property
    def failed(self) -> bool:
        """Whether any class had to be skipped."""
        return bool(self.class_errors)


def build_nullability(settings: NullabilitySettings) -> NullabilityProvider:
    """Build the annotation-based provider described by ``settings``."""
    return AnnotationNullability(
        settings.nullable,
        settings.nonnull,
        settings.parameters_nonnull_by_default,
        parameter_default=settings.parameter_default,
        return_default=settings.return_default,
    )


def archive_path_for(
    model_path: str | os.PathLike[str],
    output_dir: str | os.PathLike[str],
    suffix: str = DEFAULT_ARCHIVE_SUFFIX,
) -> Path:
    """Return the archive path for a type-model file.

    Args:
        model_path: Type-model file the archive is generated from.
        output_dir: Directory receiving the archive.
        suffix: Appended to the model file's stem.

    Returns:
        ``output_dir / (stem + suffix)``, e.g. ``guava-annotations.zip``.
    """
    return Path(output_dir) / f"{Path(model_path).stem}{suffix}"


class _MethodErrorLog:
    """Log each distinct method failure once, across all classes of an archive."""

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._messages: list[str] = []

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(self._messages)

    def __call__(self, error: MethodAnnotationError) -> None:
        if error.reason in self._seen:
            return
        self._seen.add(error.reason)
        self._messages.append(str(error))
        logger.info(
            "%s",
            format_causal_chain(error),
            extra=structured_extra(
                component=LogComponent.SERVICES,
                type_name=error.type_name,
                method=error.method_name,
                error_code=error_code_for(error),
            ),
        )


def generate_annotation_archive(
    classes: Iterable[ClassDescription],
    destination: str | os.PathLike[str],
    nullability: NullabilityProvider | None = None,
) -> ArchiveResult:
    """Write the annotation archive for ``classes`` to ``destination``.

    Classes are processed in binary-name order. A class whose header or
    supertypes cannot be rendered is logged and skipped; methods that cannot be
    rendered are logged once per distinct message and skipped.

    Args:
        classes: Classes to annotate.
        destination: Archive path; parent directories are created.
        nullability: Provider for the annotated renderings. Defaults to the
            JSR-305 annotations.

    Returns:
        Summary of the written archive.

    Raises:
        ArchiveWriteError: If the archive cannot be written or moved into place.
    """
    target = Path(destination)
    engine = AnnotationDiffEngine(nullability or AnnotationNullability.jsr305())
    ordered = sorted(classes, key=lambda cls: cls.name)
    method_errors = _MethodErrorLog()
    class_errors: list[str] = []
    classes_annotated = 0
    started = time.perf_counter()

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handle, temp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=".zip", dir=target.parent)
        os.close(handle)
    except OSError as exc:
        raise ArchiveWriteError(target, str(exc)) from exc

    temp_path = Path(temp_name)
    try:
        with AnnotationArchiveWriter(temp_path) as archive:
            for cls in ordered:
                logger.debug(
                    "Adding annotations for type %s",
                    cls.name,
                    extra=structured_extra(component=LogComponent.SERVICES, type_name=cls.name),
                )
                try:
                    if archive.write_type(cls, engine, method_errors):
                        classes_annotated += 1
                except ClassAnnotationError as exc:
                    message = format_causal_chain(exc)
                    class_errors.append(message)
                    logger.error(  # noqa: TRY400 # JUSTIFIED: report the causal chain without a traceback
                        "%s",
                        message,
                        extra=structured_extra(
                            component=LogComponent.SERVICES,
                            type_name=cls.name,
                            error_code=error_code_for(exc),
                        ),
                    )
            entries = archive.entries
        try:
            if entries:
                _ = temp_path.replace(target)
            else:
                _ = target.write_bytes(b"")
        except OSError as exc:
            raise ArchiveWriteError(target, str(exc)) from exc
    finally:
        temp_path.unlink(missing_ok=True)

    result = ArchiveResult(
        path=target,
        annotated=bool(entries),
        classes_total=len(ordered),
        classes_annotated=classes_annotated,
        entries=entries,
        method_errors=method_errors.messages,
        class_errors=tuple(class_errors),
    )
    logger.info(
        "Wrote %s (%d of %d classes annotated)",
        target,
        classes_annotated,
        len(ordered),
        extra=structured_extra(
            component=LogComponent.SERVICES,
            archive=target,
            entries=len(entries),
            annotated=result.annotated,
            counts={
                "classes": len(ordered),
                "annotated": classes_annotated,
                "method_errors": len(result.method_errors),
                "class_errors": len(result.class_errors),
            },
            duration_ms=(time.perf_counter() - started) * 1000,
        ),
    )
    return result


def generate_from_model_files(
    paths: Sequence[str | os.PathLike[str]],
    output_dir: str | os.PathLike[str],
    nullability: NullabilityProvider | None = None,
    suffix: str = DEFAULT_ARCHIVE_SUFFIX,
) -> list[ArchiveResult]:
    """Write one annotation archive per type-model file.

    Args:
        paths: Type-model JSON files.
        output_dir: Directory receiving the archives.
        nullability: Provider for the annotated renderings.
        suffix: Archive name suffix appended to each model file's stem.

    Returns:
        One result per input file, in input order.
    """
    results: list[ArchiveResult] = []
    for path in paths:
        logger.info(
            "Creating annotations archive for %s",
            path,
            extra=structured_extra(component=LogComponent.SERVICES, path=path),
        )
        model = load_type_model(path)
        destination = archive_path_for(path, output_dir, suffix)
        results.append(generate_annotation_archive(model.classes, destination, nullability))
    return results


__all__ = [
    "ArchiveResult",
    "archive_path_for",
    "build_nullability",
    "generate_annotation_archive",
    "generate_from_model_files",
]
