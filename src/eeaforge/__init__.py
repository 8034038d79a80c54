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

"""eeaforge - Eclipse external annotation generator.

Renders classes and methods as JVM generic signatures with nullness markers,
diffs plain and annotated renderings, and packages the differences as
``.eea`` records in a zip archive.
"""

from __future__ import annotations

from eeaforge._internal.exceptions import (
    EeaforgeError,
    EeaforgeTypeError,
    EeaforgeValidationError,
)

from .annotations import AnnotationArchiveWriter, AnnotationDiffEngine, AnnotationRecord
from .config import Config, load_config
from .metadata import TypeModel, load_type_model, parse_type_model
from .nullability import (
    AnnotationNullability,
    CombinedNullability,
    ConstantNullability,
    NullabilityProvider,
    omit,
    undefined,
)
from .services.annotations import (
    ArchiveResult,
    build_nullability,
    generate_annotation_archive,
    generate_from_model_files,
)
from .signatures import Nullness, SignatureWriter, method_signature, type_signature

__all__ = [
    "__version__",
    "AnnotationArchiveWriter",
    "AnnotationDiffEngine",
    "AnnotationNullability",
    "AnnotationRecord",
    "ArchiveResult",
    "CombinedNullability",
    "Config",
    "ConstantNullability",
    "EeaforgeError",
    "EeaforgeTypeError",
    "EeaforgeValidationError",
    "NullabilityProvider",
    "Nullness",
    "SignatureWriter",
    "TypeModel",
    "build_nullability",
    "generate_annotation_archive",
    "generate_from_model_files",
    "load_config",
    "load_type_model",
    "method_signature",
    "omit",
    "parse_type_model",
    "type_signature",
    "undefined",
]

__version__ = "0.1.0"
