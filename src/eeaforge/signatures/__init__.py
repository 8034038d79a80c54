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

"""Type model, nullness values and the JVM signature writer."""

from __future__ import annotations

from .errors import InvalidBoundsError, InvalidWildcardError, MissingBoundsError, SignatureError
from .nullness import Nullness
from .shapes import (
    OBJECT,
    VOID,
    ArrayType,
    ClassDescription,
    ClassType,
    MethodContext,
    MethodDescription,
    PackageDescription,
    ParameterContext,
    ParameterDescription,
    Primitive,
    PrimitiveKind,
    TypeArgument,
    TypeParameter,
    TypeShape,
    TypeVariable,
    Wildcard,
    lower_bounded,
    unbounded,
    upper_bounded,
)
from .writer import (
    SignatureWriter,
    method_signature,
    type_arguments_signature,
    type_parameters_signature,
    type_signature,
)

__all__ = [
    "OBJECT",
    "VOID",
    "ArrayType",
    "ClassDescription",
    "ClassType",
    "InvalidBoundsError",
    "InvalidWildcardError",
    "MethodContext",
    "MethodDescription",
    "MissingBoundsError",
    "Nullness",
    "PackageDescription",
    "ParameterContext",
    "ParameterDescription",
    "Primitive",
    "PrimitiveKind",
    "SignatureError",
    "SignatureWriter",
    "TypeArgument",
    "TypeParameter",
    "TypeShape",
    "TypeVariable",
    "Wildcard",
    "lower_bounded",
    "method_signature",
    "type_arguments_signature",
    "type_parameters_signature",
    "type_signature",
    "unbounded",
    "upper_bounded",
]
