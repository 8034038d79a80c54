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

"""Pydantic models for the JSON type-model document.

The document is produced by a bytecode reader outside eeaforge and lists the
packages and classes of one compiled artefact. Field names follow the
camelCase convention of the document; model attributes are snake_case.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar, Final, Literal, TypeAlias

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

TYPE_MODEL_VERSION: Final[int] = 1
OBJECT_NAME: Final[str] = "java.lang.Object"

STRICT_MODEL_CONFIG: ConfigDict = ConfigDict(extra="forbid", populate_by_name=True)

TypeKind: TypeAlias = Literal["class", "array", "variable", "primitive", "wildcard"]

_REQUIRED_BY_KIND: Final[dict[str, str]] = {
    "class": "name",
    "array": "component",
    "variable": "symbol",
    "primitive": "name",
}


def alias_field(
    camel_name: str,
    *,
    default: object = ...,
    default_factory: Callable[[], object] | None = None,
) -> Any:  # noqa: ANN401 # JUSTIFIED: Must return Any to work with Pydantic field annotations
    """Return a Field configured with matching validation and serialization aliases.

    Args:
        camel_name: Canonical camelCase field name in the document.
        default: Default value for the field (use ... for required fields).
        default_factory: Factory function to generate default values.

    Returns:
        FieldInfo accepting the camelCase name while exposing a snake_case
        attribute on the model.
    """
    aliases = AliasChoices(camel_name)
    if default_factory is not None:
        return Field(
            default_factory=default_factory,
            validation_alias=aliases,
            serialization_alias=camel_name,
        )
    return Field(
        default=default,
        validation_alias=aliases,
        serialization_alias=camel_name,
    )


class TypeRefModel(BaseModel):
    """Structured type reference.

    Which attributes apply depends on ``kind``: ``class`` uses ``name``,
    ``arguments``, ``owner`` and ``interface``; ``array`` uses ``component``;
    ``variable`` uses ``symbol``; ``primitive`` uses ``name``; ``wildcard``
    uses ``upper`` and ``lower``.

    A plain string names a class, primitive or array type. Such a class is an
    interface only when the document declares it as one or it is one of the
    well-known JDK interfaces; other external interfaces need the structured
    ``{"kind": "class", "interface": true}`` form.
    """

    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    kind: TypeKind
    name: str | None = None
    arguments: list[TypeRef] = Field(default_factory=list)
    owner: TypeRef | None = None
    interface: bool = False
    component: TypeRef | None = None
    symbol: str | None = None
    upper: list[TypeRef] | None = None
    lower: list[TypeRef] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_required(self) -> TypeRefModel:
        required = _REQUIRED_BY_KIND.get(self.kind)
        if required is not None and not getattr(self, required):
            message = f"type reference of kind '{self.kind}' requires '{required}'"
            raise ValueError(message)
        return self


TypeRef: TypeAlias = str | TypeRefModel

_ = TypeRefModel.model_rebuild()


def _object_bounds() -> list[TypeRef]:
    return [OBJECT_NAME]


class TypeParameterModel(BaseModel):
    """A declared type parameter; bounds default to ``java.lang.Object``.

    Every bound after the first must be an interface. Bounds naming external
    interfaces outside the well-known JDK set need the structured form with
    ``"interface": true``.
    """

    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    symbol: str
    bounds: list[TypeRef] = Field(default_factory=_object_bounds)


class ParameterModel(BaseModel):
    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    name: str = ""
    type: TypeRef
    annotations: list[str] = Field(default_factory=list)


class MethodModel(BaseModel):
    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    name: str
    type_parameters: list[TypeParameterModel] = alias_field("typeParameters", default_factory=list)
    parameters: list[ParameterModel] = Field(default_factory=list)
    return_type: TypeRef = alias_field("returnType", default="void")
    annotations: list[str] = Field(default_factory=list)


class ClassModel(BaseModel):
    """A class entry.

    When ``superclass`` is absent it defaults to ``java.lang.Object`` for
    classes and to no superclass for interfaces; an explicit ``null`` means no
    superclass.
    """

    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    name: str
    interface: bool = False
    annotations: list[str] = Field(default_factory=list)
    type_parameters: list[TypeParameterModel] = alias_field("typeParameters", default_factory=list)
    superclass: TypeRef | None = None
    interfaces: list[TypeRef] = Field(default_factory=list)
    methods: list[MethodModel] = Field(default_factory=list)

    @property
    def effective_superclass(self) -> TypeRef | None:
        """Superclass reference after applying the class/interface default."""
        if "superclass" in self.model_fields_set or self.interface:
            return self.superclass
        return OBJECT_NAME


class PackageModel(BaseModel):
    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    annotations: list[str] = Field(default_factory=list)


class TypeModelDocument(BaseModel):
    """Root of a type-model document."""

    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    version: int = TYPE_MODEL_VERSION
    packages: dict[str, PackageModel] = Field(default_factory=dict)
    classes: list[ClassModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_document(self) -> TypeModelDocument:
        if self.version != TYPE_MODEL_VERSION:
            message = f"Unsupported type model version {self.version}; expected {TYPE_MODEL_VERSION}"
            raise ValueError(message)
        seen: set[str] = set()
        for cls in self.classes:
            if cls.name in seen:
                message = f"Duplicate class '{cls.name}'"
                raise ValueError(message)
            seen.add(cls.name)
        return self


__all__ = [
    "OBJECT_NAME",
    "TYPE_MODEL_VERSION",
    "ClassModel",
    "MethodModel",
    "PackageModel",
    "ParameterModel",
    "TypeKind",
    "TypeModelDocument",
    "TypeParameterModel",
    "TypeRef",
    "TypeRefModel",
    "alias_field",
]
