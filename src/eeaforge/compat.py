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

"""Version compatibility shims used across eeaforge.

eeaforge supports Python 3.10 and newer. The handful of names that moved into
the standard library after 3.10 are resolved here once, so the rest of the
package imports them from a single place:

- ``tomllib``: stdlib TOML parser on 3.11+, the ``tomli`` backport on 3.10.
- ``StrEnum``: ``enum.StrEnum`` on 3.11+, a ``str``/``Enum`` mixin otherwise.
- ``UTC``: ``datetime.UTC`` on 3.11+, ``timezone.utc`` otherwise.
- Typing helpers (``assert_never``, ``override``, ``Self``, ``TypedDict``,
  ``Unpack``) from ``typing`` or ``typing_extensions``.
"""

from __future__ import annotations

import enum as _enum
from datetime import timezone
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    import tomli as tomllib
    from typing_extensions import Self, TypedDict, Unpack, assert_never, override
else:
    try:
        import tomllib  # py311+
    except ModuleNotFoundError:  # py<3.11
        import tomli as tomllib

    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import Self, Unpack, assert_never  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import Self, Unpack, assert_never


class _StrEnumBase(str, _enum.Enum):
    """Type base for StrEnum-like enums."""


if TYPE_CHECKING:

    class StrEnum(_StrEnumBase):
        """Type-checker view of StrEnum."""

else:
    _STR_ENUM = getattr(_enum, "StrEnum", None)

    if _STR_ENUM is None:

        class _CompatStrEnum(_StrEnumBase):
            """Backport of enum.StrEnum for Python 3.10."""

            def __str__(self) -> str:
                return str(self.value)

        StrEnum: type[_StrEnumBase] = _CompatStrEnum
    else:
        StrEnum = cast("type[_StrEnumBase]", _STR_ENUM)

UTC = timezone.utc

__all__ = [
    "UTC",
    "Self",
    "StrEnum",
    "TypedDict",
    "Unpack",
    "assert_never",
    "override",
    "tomllib",
]
