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

"""Load JSON type-model documents into the structural type model.

The document is validated by the pydantic models in ``models`` and converted
into the immutable descriptions consumed by the signature writer and the diff
engine.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from eeaforge._internal.exceptions import EeaforgeError, EeaforgeValidationError
from eeaforge._internal.logging_utils import structured_extra
from eeaforge.core.model_types import LogComponent
from eeaforge.signatures.shapes import (
    OBJECT,
    ArrayType,
    ClassDescription,
    ClassType,
    MethodDescription,
    PackageDescription,
    ParameterDescription,
    Primitive,
    PrimitiveKind,
    TypeParameter,
    TypeVariable,
    Wildcard,
)

from .models import ClassModel, MethodModel, TypeModelDocument, TypeParameterModel, TypeRefModel

if TYPE_CHECKING:
    import os

    from eeaforge.signatures.shapes import Bound, TypeArgument, TypeShape

    from .models import TypeRef

logger: logging.Logger = logging.getLogger("eeaforge.metadata")

ARRAY_SUFFIX: Final[str] = "[]"
_PRIMITIVES: Final[frozenset[str]] = frozenset(kind.value for kind in PrimitiveKind)
# Interfaces recognised by name when the document does not declare them.
WELL_KNOWN_INTERFACES: Final[frozenset[str]] = frozenset(
    (
        "java.io.Closeable",
        "java.io.Serializable",
        "java.lang.Appendable",
        "java.lang.AutoCloseable",
        "java.lang.CharSequence",
        "java.lang.Cloneable",
        "java.lang.Comparable",
        "java.lang.Iterable",
        "java.lang.Runnable",
        "java.util.Collection",
        "java.util.Comparator",
        "java.util.Iterator",
        "java.util.List",
        "java.util.Map",
        "java.util.Map$Entry",
        "java.util.Queue",
        "java.util.Set",
        "java.util.concurrent.Callable",
        "java.util.function.Function",
        "java.util.function.Supplier",
    )
)


class TypeModelReadError(EeaforgeError):
    """Raised when a type-model file cannot be read or is not JSON."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The type-model file that could not be read.
            error: The underlying exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read type model {path}: {error}")


class TypeModelValidationError(EeaforgeValidationError):
    """Raised when a type-model document is structurally invalid.

    Attributes:
        source: Path or label of the document.
        validation_error: Underlying pydantic error, when validation failed
            at the schema level.
    """

    def __init__(self, source: str, detail: str, validation_error: ValidationError | None = None) -> None:
        """Initialize the exception.

        Args:
            source: Path or label of the document.
            detail: Description of the problem.
            validation_error: Underlying pydantic error, if any.
        """
        self.source = source
        self.validation_error = validation_error
        super().__init__(f"Invalid type model {source}: {detail}")


@dataclass(slots=True, frozen=True)
class TypeModel:
    """Packages and classes of one compiled artefact.

    Attributes:
        packages: Package descriptions keyed by dotted package name.
        classes: Class descriptions in document order.
    """

    packages: Mapping[str, PackageDescription] = field(default_factory=dict)
    classes: tuple[ClassDescription, ...] = ()

    def find_class(self, name: str) -> ClassDescription | None:
        """Return the class with binary name ``name``, if present."""
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None


class _Converter:
    """Convert validated document models into type-model dataclasses."""

    def __init__(self, document: TypeModelDocument, source: str) -> None:
        self._source = source
        declared_classes = frozenset(cls.name for cls in document.classes if not cls.interface)
        self._interfaces = (WELL_KNOWN_INTERFACES - declared_classes) | frozenset(
            cls.name for cls in document.classes if cls.interface
        )
        self._packages = {
            name: PackageDescription(name, tuple(package.annotations)) for name, package in document.packages.items()
        }

    @property
    def packages(self) -> dict[str, PackageDescription]:
        return self._packages

    def fail(self, detail: str) -> TypeModelValidationError:
        return TypeModelValidationError(self._source, detail)

    def class_description(self, model: ClassModel) -> ClassDescription:
        context = f"class {model.name}"
        cls_type = ClassType.of(model.name, is_interface=model.interface)
        package = self._packages.get(cls_type.package) or PackageDescription(cls_type.package)
        superclass_ref = model.effective_superclass
        superclass = None if superclass_ref is None else self.class_type(superclass_ref, f"{context} superclass")
        interfaces = tuple(
            self.class_type(ref, f"{context} interface", interface=True) for ref in model.interfaces
        )
        return ClassDescription(
            type=cls_type,
            package=package,
            type_parameters=self.type_parameters(model.type_parameters, context),
            superclass=superclass,
            interfaces=interfaces,
            methods=tuple(self.method(method, context) for method in model.methods),
            annotations=tuple(model.annotations),
        )

    def method(self, model: MethodModel, context: str) -> MethodDescription:
        context = f"{context} method {model.name}"
        parameters = tuple(
            ParameterDescription(
                name=parameter.name or f"arg{index}",
                type=self.type_shape(parameter.type, f"{context} parameter {index}"),
                annotations=tuple(parameter.annotations),
            )
            for index, parameter in enumerate(model.parameters)
        )
        return MethodDescription(
            name=model.name,
            type_parameters=self.type_parameters(model.type_parameters, context),
            parameters=parameters,
            return_type=self.type_shape(model.return_type, f"{context} return type"),
            annotations=tuple(model.annotations),
        )

    def type_parameters(self, models: list[TypeParameterModel], context: str) -> tuple[TypeParameter, ...]:
        return tuple(
            TypeParameter(
                model.symbol,
                tuple(self.bound(bound, f"{context} bound of {model.symbol}") for bound in model.bounds),
            )
            for model in models
        )

    def bound(self, ref: TypeRef, context: str) -> Bound:
        shape = self.type_shape(ref, context)
        if not isinstance(shape, (ClassType, TypeVariable)):
            raise self.fail(f"{context} must be a class or type variable")
        return shape

    def class_type(self, ref: TypeRef, context: str, *, interface: bool = False) -> ClassType:
        shape = self.type_shape(ref, context)
        if not isinstance(shape, ClassType):
            raise self.fail(f"{context} must be a class type")
        if interface and not shape.is_interface:
            return replace(shape, is_interface=True)
        return shape

    def type_shape(self, ref: TypeRef, context: str) -> TypeShape:
        argument = self.type_argument(ref, context)
        if isinstance(argument, Wildcard):
            raise self.fail(f"{context}: wildcards are only allowed as type arguments")
        return argument

    def type_argument(self, ref: TypeRef, context: str) -> TypeArgument:
        if isinstance(ref, str):
            return self._named_type(ref.strip(), context)
        return self._structured_type(ref, context)

    def _named_type(self, name: str, context: str) -> TypeShape:
        if not name:
            raise self.fail(f"{context}: empty type name")
        if name.endswith(ARRAY_SUFFIX):
            return ArrayType(self._named_type(name[: -len(ARRAY_SUFFIX)].rstrip(), context))
        if name in _PRIMITIVES:
            return Primitive(PrimitiveKind.from_str(name))
        return ClassType.of(name, is_interface=name in self._interfaces)

    def _structured_type(self, ref: TypeRefModel, context: str) -> TypeArgument:
        match ref.kind:
            case "primitive":
                try:
                    return Primitive(PrimitiveKind.from_str(ref.name or ""))
                except ValueError as exc:
                    raise self.fail(f"{context}: {exc}") from exc
            case "array":
                if ref.component is None:
                    raise self.fail(f"{context}: array requires a component")
                return ArrayType(self.type_shape(ref.component, f"{context} component"))
            case "variable":
                return TypeVariable(ref.symbol or "")
            case "wildcard":
                upper = (
                    (OBJECT,)
                    if ref.upper is None
                    else tuple(self.type_shape(bound, f"{context} upper bound") for bound in ref.upper)
                )
                lower = tuple(self.type_shape(bound, f"{context} lower bound") for bound in ref.lower)
                return Wildcard(upper_bounds=upper, lower_bounds=lower)
            case _:
                return self._structured_class(ref, context)

    def _structured_class(self, ref: TypeRefModel, context: str) -> ClassType:
        name = ref.name or ""
        arguments = tuple(self.type_argument(argument, f"{context} type argument") for argument in ref.arguments)
        owner = None if ref.owner is None else self.class_type(ref.owner, f"{context} owner")
        return ClassType.of(
            name,
            *arguments,
            is_interface=ref.interface or name in self._interfaces,
            owner=owner,
        )


def parse_type_model(payload: object, *, source: str = "<payload>") -> TypeModel:
    """Validate a decoded JSON payload and convert it into a ``TypeModel``.

    Args:
        payload: Decoded JSON document.
        source: Label used in error messages.

    Returns:
        The converted type model.

    Raises:
        TypeModelValidationError: If the payload does not describe a valid
            type model.
    """
    try:
        document = TypeModelDocument.model_validate(payload)
    except ValidationError as exc:
        raise TypeModelValidationError(source, str(exc), exc) from exc
    converter = _Converter(document, source)
    classes = tuple(converter.class_description(model) for model in document.classes)
    return TypeModel(packages=converter.packages, classes=classes)


def load_type_model(path: str | os.PathLike[str]) -> TypeModel:
    """Read and convert a type-model JSON file.

    Args:
        path: Location of the JSON document.

    Returns:
        The converted type model.

    Raises:
        TypeModelReadError: If the file cannot be read or decoded.
        TypeModelValidationError: If the document is invalid.
    """
    model_path = Path(path)
    try:
        payload: object = json.loads(model_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise TypeModelReadError(model_path, exc) from exc
    model = parse_type_model(payload, source=str(model_path))
    logger.debug(
        "Loaded %d class(es) from %s",
        len(model.classes),
        model_path,
        extra=structured_extra(
            component=LogComponent.METADATA,
            path=model_path,
            counts={"classes": len(model.classes), "packages": len(model.packages)},
        ),
    )
    return model


__all__ = [
    "TypeModel",
    "TypeModelReadError",
    "TypeModelValidationError",
    "WELL_KNOWN_INTERFACES",
    "load_type_model",
    "parse_type_model",
]
