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

"""Stable error codes for structured eeaforge exceptions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from eeaforge._internal.exceptions import EeaforgeError, EeaforgeTypeError, EeaforgeValidationError

from ..annotations.errors import ArchiveClosedError, ArchiveWriteError, ClassAnnotationError, MethodAnnotationError
from ..config import (
    ConfigFieldChoiceError,
    ConfigFieldTypeError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)
from ..metadata import TypeModelReadError, TypeModelValidationError
from ..signatures.errors import InvalidBoundsError, InvalidWildcardError, MissingBoundsError, SignatureError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    EeaforgeError: ErrorCode("EF000"),
    EeaforgeValidationError: ErrorCode("EF100"),
    EeaforgeTypeError: ErrorCode("EF101"),
    ConfigValidationError: ErrorCode("EF110"),
    ConfigFieldTypeError: ErrorCode("EF111"),
    ConfigFieldChoiceError: ErrorCode("EF112"),
    UnsupportedConfigVersionError: ErrorCode("EF113"),
    ConfigReadError: ErrorCode("EF114"),
    InvalidConfigFileError: ErrorCode("EF115"),
    SignatureError: ErrorCode("EF200"),
    MissingBoundsError: ErrorCode("EF201"),
    InvalidBoundsError: ErrorCode("EF202"),
    InvalidWildcardError: ErrorCode("EF203"),
    ClassAnnotationError: ErrorCode("EF300"),
    MethodAnnotationError: ErrorCode("EF301"),
    ArchiveWriteError: ErrorCode("EF310"),
    ArchiveClosedError: ErrorCode("EF311"),
    TypeModelReadError: ErrorCode("EF400"),
    TypeModelValidationError: ErrorCode("EF401"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured eeaforge exception."""
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("EF000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Intended for diagnostics, tests, and documentation generation; avoids
    exposing the private mapping while keeping a single source of truth.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
