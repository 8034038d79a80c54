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

"""Configuration models and errors.

TOML payloads are validated with pydantic models and then converted into
slotted dataclasses that the rest of eeaforge consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from eeaforge._internal.exceptions import EeaforgeValidationError
from eeaforge.nullability import JSR305_NONNULL, JSR305_NULLABLE, JSR305_PARAMETERS_NONNULL_BY_DEFAULT
from eeaforge.signatures.nullness import Nullness

from .constants import CONFIG_VERSION, DEFAULT_ARCHIVE_SUFFIX, DEFAULT_OUTPUT_DIRECTORY

DEFAULT_CHOICES: Final[tuple[str, ...]] = (
    Nullness.NULLABLE.value,
    Nullness.NONNULL.value,
    Nullness.UNDEFINED.value,
)


class ConfigValidationError(EeaforgeValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldTypeError(ConfigValidationError):
    """Raised when a configuration field has an invalid type."""

    def __init__(self, field: str) -> None:
        """Initialize the exception with the field name that has an invalid type.

        Args:
            field: The name of the configuration field with an invalid type.
        """
        self.field = field
        super().__init__(f"{field} must be a non-empty string")


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a configuration field is provided with an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        """Initialize the exception with the field name and allowed values.

        Args:
            field: The name of the configuration field with an invalid value.
            allowed: Tuple of allowed values for this field.
        """
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of eeaforge.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid eeaforge configuration in {path}: {error}")


def _annotation_name(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigFieldTypeError(field_name)
    return value.strip()


def _default_nullness(value: object, field_name: str) -> Nullness:
    if value is None:
        return Nullness.UNDEFINED
    if isinstance(value, Nullness):
        candidate = value
    elif isinstance(value, str):
        try:
            candidate = Nullness.from_str(value)
        except ValueError as exc:
            raise ConfigFieldChoiceError(field_name, DEFAULT_CHOICES) from exc
    else:
        raise ConfigFieldChoiceError(field_name, DEFAULT_CHOICES)
    if candidate is Nullness.OMIT:
        raise ConfigFieldChoiceError(field_name, DEFAULT_CHOICES)
    return candidate


@dataclass(slots=True)
class NullabilitySettings:
    """Annotation names and defaults used to build the nullability provider.

    Attributes:
        nullable: Annotation name marking an element nullable.
        nonnull: Annotation name marking an element non-null.
        parameters_nonnull_by_default: Package annotation making parameters
            non-null unless annotated otherwise.
        parameter_default: Nullness assumed for parameters before annotations
            are consulted.
        return_default: Nullness assumed for return values before annotations
            are consulted.
    """

    nullable: str = JSR305_NULLABLE
    nonnull: str = JSR305_NONNULL
    parameters_nonnull_by_default: str = JSR305_PARAMETERS_NONNULL_BY_DEFAULT
    parameter_default: Nullness = Nullness.UNDEFINED
    return_default: Nullness = Nullness.UNDEFINED


def _default_output_directory() -> Path:
    return Path(DEFAULT_OUTPUT_DIRECTORY)


@dataclass(slots=True)
class OutputSettings:
    """Where archives are written and how they are named."""

    directory: Path = field(default_factory=_default_output_directory)
    suffix: str = DEFAULT_ARCHIVE_SUFFIX


@dataclass(slots=True)
class Config:
    """Runtime configuration of eeaforge."""

    nullability: NullabilitySettings = field(default_factory=NullabilitySettings)
    output: OutputSettings = field(default_factory=OutputSettings)


class NullabilityConfigModel(BaseModel):
    """Pydantic model for the ``[nullability]`` table."""

    nullable: str = JSR305_NULLABLE
    nonnull: str = JSR305_NONNULL
    parameters_nonnull_by_default: str = JSR305_PARAMETERS_NONNULL_BY_DEFAULT
    parameter_default: Nullness = Nullness.UNDEFINED
    return_default: Nullness = Nullness.UNDEFINED

    @field_validator("nullable", "nonnull", "parameters_nonnull_by_default", mode="before")
    @classmethod
    def _validate_annotation_name(cls, value: object, info: ValidationInfo) -> str:
        field_name = info.field_name or "annotation"
        return _annotation_name(value, f"nullability.{field_name}")

    @field_validator("parameter_default", "return_default", mode="before")
    @classmethod
    def _validate_default(cls, value: object, info: ValidationInfo) -> Nullness:
        field_name = info.field_name or "default"
        return _default_nullness(value, f"nullability.{field_name}")


class OutputConfigModel(BaseModel):
    """Pydantic model for the ``[output]`` table."""

    directory: Path = Field(default_factory=_default_output_directory)
    suffix: str = DEFAULT_ARCHIVE_SUFFIX

    @field_validator("suffix", mode="before")
    @classmethod
    def _validate_suffix(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ConfigFieldTypeError("output.suffix")
        return value.strip()


class ConfigModel(BaseModel):
    """Pydantic model for validating the top-level eeaforge configuration from TOML.

    Attributes:
        config_version: Schema version number for the configuration file.
        nullability: Annotation names and defaults.
        output: Archive output settings.
    """

    config_version: int = Field(default=CONFIG_VERSION)
    nullability: NullabilityConfigModel = Field(default_factory=NullabilityConfigModel)
    output: OutputConfigModel = Field(default_factory=OutputConfigModel)

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def nullability_from_model(model: NullabilityConfigModel) -> NullabilitySettings:
    """Convert a NullabilityConfigModel to a NullabilitySettings dataclass."""
    return NullabilitySettings(**model.model_dump(mode="python"))


def output_from_model(base_dir: Path, model: OutputConfigModel) -> OutputSettings:
    """Convert an OutputConfigModel to OutputSettings, resolving the directory.

    Args:
        base_dir: Directory that a relative output directory is resolved against.
        model: The validated OutputConfigModel from TOML parsing.

    Returns:
        Output settings with an absolute directory.
    """
    directory = model.directory if model.directory.is_absolute() else (base_dir / model.directory).resolve()
    return OutputSettings(directory=directory, suffix=model.suffix)


def config_from_model(base_dir: Path, model: ConfigModel) -> Config:
    """Convert a validated ConfigModel to the runtime Config dataclass."""
    return Config(
        nullability=nullability_from_model(model.nullability),
        output=output_from_model(base_dir, model.output),
    )


__all__ = [
    "DEFAULT_CHOICES",
    "Config",
    "ConfigFieldChoiceError",
    "ConfigFieldTypeError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "NullabilityConfigModel",
    "NullabilitySettings",
    "OutputConfigModel",
    "OutputSettings",
    "UnsupportedConfigVersionError",
    "config_from_model",
    "nullability_from_model",
    "output_from_model",
]
