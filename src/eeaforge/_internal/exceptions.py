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

"""Common exception hierarchy for eeaforge."""

from __future__ import annotations


class EeaforgeError(Exception):
    """Base error for all eeaforge exceptions."""


class EeaforgeValidationError(EeaforgeError, ValueError):
    """Raised when input data fails validation checks."""


class EeaforgeTypeError(EeaforgeError, TypeError):
    """Raised when input data has an unexpected type."""


def iter_causes(exc: BaseException) -> list[BaseException]:
    """Return ``exc`` followed by its chain of explicit causes, outermost first.

    Args:
        exc: Exception to unwind.

    Returns:
        Exceptions linked through ``__cause__`` (cycles are cut).
    """
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and all(current is not seen for seen in chain):
        chain.append(current)
        current = current.__cause__
    return chain


def format_causal_chain(exc: BaseException) -> str:
    """Join the messages of ``exc`` and its causes with ``": "``."""
    return ": ".join(str(item) for item in iter_causes(exc) if str(item))


__all__ = [
    "EeaforgeError",
    "EeaforgeTypeError",
    "EeaforgeValidationError",
    "format_causal_chain",
    "iter_causes",
]
