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

"""Errors raised while diffing classes and writing annotation archives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eeaforge._internal.exceptions import EeaforgeError

if TYPE_CHECKING:
    from pathlib import Path


class ClassAnnotationError(EeaforgeError):
    """Raised when the header or supertypes of a class cannot be rendered."""

    def __init__(self, type_name: str) -> None:
        """Initialise the error.

        Args:
            type_name: Binary name of the class that failed.
        """
        self.type_name = type_name
        super().__init__(f"Could not write external annotations for {type_name}")


class MethodAnnotationError(EeaforgeError):
    """Reported when a single method of a class cannot be rendered."""

    def __init__(self, type_name: str, method_name: str, reason: str) -> None:
        """Initialise the error.

        Args:
            type_name: Binary name of the declaring class.
            method_name: Name of the method that failed.
            reason: Message of the underlying failure.
        """
        self.type_name = type_name
        self.method_name = method_name
        self.reason = reason
        super().__init__(f"Could not write external annotations for method {type_name}.{method_name}: {reason}")


class ArchiveWriteError(EeaforgeError):
    """Raised when the annotation archive cannot be created, appended or closed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise the error.

        Args:
            path: Archive path.
            reason: Description of the failure.
        """
        self.path = path
        super().__init__(f"Could not write annotation archive {path}: {reason}")


class ArchiveClosedError(ArchiveWriteError):
    """Raised when entries are added to an archive that was already closed."""

    def __init__(self, path: Path) -> None:
        """Initialise the error.

        Args:
            path: Archive path.
        """
        super().__init__(path, "archive is closed")


__all__ = ["ArchiveClosedError", "ArchiveWriteError", "ClassAnnotationError", "MethodAnnotationError"]
