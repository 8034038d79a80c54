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

"""Zip packaging of ``.eea`` annotation records."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING

from eeaforge._internal.logging_utils import structured_extra
from eeaforge.core.model_types import LogComponent

from .errors import ArchiveClosedError, ArchiveWriteError

if TYPE_CHECKING:
    import os
    from types import TracebackType

    from eeaforge.compat import Self
    from eeaforge.signatures.shapes import ClassDescription

    from .diff import AnnotationDiffEngine, AnnotationRecord, ErrorSink

logger: logging.Logger = logging.getLogger("eeaforge.archive")


class AnnotationArchiveWriter:
    """Write annotation records into a deflated zip archive.

    The archive is opened on construction and must be closed, preferably with
    a ``with`` block. Only annotated records become entries; each entry is
    named after the internal class name with the ``.eea`` suffix.

    Example:
        >>> with AnnotationArchiveWriter(path) as archive:  # doctest: +SKIP
        ...     archive.write_type(cls, engine)
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Open the archive for writing, truncating any existing file.

        Args:
            path: Archive location.

        Raises:
            ArchiveWriteError: If the file cannot be created.
        """
        self._path = Path(path)
        self._entries: list[str] = []
        try:
            self._zip: zipfile.ZipFile | None = zipfile.ZipFile(self._path, "w", zipfile.ZIP_DEFLATED)
        except OSError as exc:
            raise ArchiveWriteError(self._path, str(exc)) from exc

    @property
    def path(self) -> Path:
        """Archive location."""
        return self._path

    @property
    def entries(self) -> tuple[str, ...]:
        """Entry names written so far, in order."""
        return tuple(self._entries)

    @property
    def closed(self) -> bool:
        """Whether the archive has been closed."""
        return self._zip is None

    def add(self, record: AnnotationRecord) -> bool:
        """Write ``record`` as an entry when it is annotated.

        Args:
            record: Record produced by the diff engine.

        Returns:
            ``True`` when an entry was written.

        Raises:
            ArchiveClosedError: If the archive was already closed.
            ArchiveWriteError: If the entry already exists or cannot be written.
        """
        if self._zip is None:
            raise ArchiveClosedError(self._path)
        if not record.annotated:
            return False
        name = record.entry_name
        if name in self._entries:
            raise ArchiveWriteError(self._path, f"duplicate entry {name}")
        try:
            self._zip.writestr(name, record.body.encode("utf-8"))
        except (OSError, zipfile.BadZipFile, ValueError) as exc:
            raise ArchiveWriteError(self._path, str(exc)) from exc
        self._entries.append(name)
        logger.debug(
            "Added %s",
            name,
            extra=structured_extra(
                component=LogComponent.ARCHIVE,
                type_name=record.type_name,
                archive=self._path,
                entries=len(self._entries),
            ),
        )
        return True

    def write_type(
        self,
        cls: ClassDescription,
        engine: AnnotationDiffEngine,
        on_error: ErrorSink | None = None,
    ) -> bool:
        """Diff ``cls`` with ``engine`` and add the resulting record.

        Returns:
            ``True`` when the class was annotated and written.
        """
        return self.add(engine.diff(cls, on_error))

    def close(self) -> None:
        """Finish the archive. Calling ``close`` again has no effect.

        Raises:
            ArchiveWriteError: If the central directory cannot be written.
        """
        if self._zip is None:
            return
        archive, self._zip = self._zip, None
        try:
            archive.close()
        except (OSError, zipfile.BadZipFile, ValueError) as exc:
            raise ArchiveWriteError(self._path, str(exc)) from exc

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["AnnotationArchiveWriter"]
