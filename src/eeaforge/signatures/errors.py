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

"""Errors raised while rendering signatures."""

from __future__ import annotations

from eeaforge._internal.exceptions import EeaforgeValidationError


class SignatureError(EeaforgeValidationError):
    """Raised when an element cannot be rendered as a signature.

    Attributes:
        element: The offending model element (type shape, wildcard, type
            parameter or method).
    """

    def __init__(self, element: object, message: str) -> None:
        """Initialise the error.

        Args:
            element: The offending model element.
            message: Human-readable description of the problem.
        """
        self.element = element
        super().__init__(message)


class MissingBoundsError(SignatureError):
    """Raised when a type parameter declares no upper bound."""


class InvalidBoundsError(SignatureError):
    """Raised when a type parameter lists a class or type variable after its first bound."""


class InvalidWildcardError(SignatureError):
    """Raised when a wildcard combines bounds the grammar cannot express."""


__all__ = ["InvalidBoundsError", "InvalidWildcardError", "MissingBoundsError", "SignatureError"]
