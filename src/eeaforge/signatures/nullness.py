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

"""Nullness values written into signatures."""

from __future__ import annotations

from typing import Final

from eeaforge.compat import StrEnum


class Nullness(StrEnum):
    """Nullness of a single signature element.

    Attributes:
        NULLABLE: Element may be ``null``; written as marker ``0``.
        NONNULL: Element is never ``null``; written as marker ``1``.
        UNDEFINED: No opinion; no marker is written.
        OMIT: Nullness is suppressed entirely. Absorbs every override.
    """

    NULLABLE = "nullable"
    NONNULL = "nonnull"
    UNDEFINED = "undefined"
    OMIT = "omit"

    @property
    def marker(self) -> str:
        """Return the marker character written after ``L``, ``T`` or ``[``."""
        return _MARKERS[self]

    def override(self, other: Nullness) -> Nullness:
        """Override this nullness with a later, more specific value.

        Args:
            other: Nullness reported by the later source.

        Returns:
            ``self`` when this value is ``OMIT``, otherwise ``other``.
        """
        if self is Nullness.OMIT:
            return self
        return other

    @classmethod
    def from_str(cls, raw: str) -> Nullness:
        """Create a Nullness enum from a string value.

        Args:
            raw: String representation of the nullness.

        Returns:
            Nullness enum value.

        Raises:
            ValueError: If the string does not match any Nullness value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown nullness '{raw}'"
            raise ValueError(msg) from exc


_MARKERS: Final[dict[Nullness, str]] = {
    Nullness.NULLABLE: "0",
    Nullness.NONNULL: "1",
    Nullness.UNDEFINED: "",
    Nullness.OMIT: "",
}

__all__ = ["Nullness"]
