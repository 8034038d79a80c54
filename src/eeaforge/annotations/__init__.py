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

"""External annotation records and their zip packaging."""

from __future__ import annotations

from .archive import AnnotationArchiveWriter
from .diff import EEA_SUFFIX, AnnotationDiffEngine, AnnotationRecord, ErrorSink
from .errors import ArchiveClosedError, ArchiveWriteError, ClassAnnotationError, MethodAnnotationError

__all__ = [
    "EEA_SUFFIX",
    "AnnotationArchiveWriter",
    "AnnotationDiffEngine",
    "AnnotationRecord",
    "ArchiveClosedError",
    "ArchiveWriteError",
    "ClassAnnotationError",
    "ErrorSink",
    "MethodAnnotationError",
]
