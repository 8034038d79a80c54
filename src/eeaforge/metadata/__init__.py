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

"""JSON type-model documents: schema and loader."""

from __future__ import annotations

from .loader import TypeModel, TypeModelReadError, TypeModelValidationError, load_type_model, parse_type_model
from .models import TYPE_MODEL_VERSION, TypeModelDocument

__all__ = [
    "TYPE_MODEL_VERSION",
    "TypeModel",
    "TypeModelDocument",
    "TypeModelReadError",
    "TypeModelValidationError",
    "load_type_model",
    "parse_type_model",
]
