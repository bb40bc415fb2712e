# Copyright 2026 Firefly Software Solutions Inc.
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
"""Unified exception hierarchy for ObjectMapper.

All mapping errors inherit from ObjectMapperException, enabling unified
error handling: catch the base class to handle every failure of a mapping
call, or catch a specific subclass for targeted handling.

Categories:
- MappingException: the input data cannot be mapped onto the target type
  (undecodable text, missing or mistyped fields)
- MappingConfigurationException: the target type itself cannot be used
  (unknown class, unsupported type annotations)
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class ObjectMapperException(Exception):
    """Base exception for all ObjectMapper errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MISSING_REQUIRED").
        context: Key-value pairs describing where the error happened
            (resolved field name, source kind, type name).
    """

    def __init__(
        self,
        message: str,
        code: str | int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict[str, Any] = context if context is not None else {}


# =============================================================================
# Data Exceptions
# =============================================================================


class MappingException(ObjectMapperException):
    """The input data cannot be mapped onto the target type."""


class DecodeError(MappingException):
    """Text input is not valid JSON or did not decode to a JSON object."""

    JSON_INVALID = 1
    """Stable code for both syntax errors and wrong-shape decode results."""

    def __init__(self, diagnostic: str | None = None, context: dict[str, Any] | None = None) -> None:
        self.diagnostic = diagnostic
        suffix = f" ({diagnostic})" if diagnostic else ""
        super().__init__(
            f"JSON data could not have been decoded{suffix}.",
            code=self.JSON_INVALID,
            context=context,
        )


class BindError(MappingException):
    """A field of the input violates a binding rule of the target type."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        field: str,
        type_name: str,
        source: str | None = None,
    ) -> None:
        self.field = field
        self.type_name = type_name
        self.source = source
        context: dict[str, Any] = {"field": field, "type": type_name}
        if source is not None:
            context["source"] = source
        super().__init__(message, code=code, context=context)


class MissingPropertyError(BindError):
    """A constructor parameter has no same-named class attribute to read its alias from."""

    def __init__(self, *, parameter: str, type_name: str) -> None:
        self.parameter = parameter
        super().__init__(
            f"Argument name {parameter} does not have its property",
            code="MISSING_PROPERTY",
            field=parameter,
            type_name=type_name,
        )


class MissingRequiredError(BindError):
    """A required constructor parameter's field is absent from the input."""

    def __init__(self, *, field: str, type_name: str, source: str) -> None:
        super().__init__(
            f"Required parameter '{field}' is not found from {source}.",
            code="MISSING_REQUIRED",
            field=field,
            type_name=type_name,
            source=source,
        )


class TypeMismatchError(BindError):
    """A field value does not satisfy the type of its constructor parameter."""

    def __init__(self, *, field: str, type_name: str, source: str, value: Any = None) -> None:
        self.value = value
        super().__init__(
            f"Parameter '{field}' has the wrong type from {source}.",
            code="TYPE_MISMATCH",
            field=field,
            type_name=type_name,
            source=source,
        )


class SetterTypeMismatchError(BindError):
    """A field value does not satisfy the parameter type of its setter."""

    def __init__(self, *, setter: str, field: str, type_name: str, source: str, value: Any = None) -> None:
        self.setter = setter
        self.value = value
        super().__init__(
            f"Setter method {setter} has incorrect argument type for its property {field}",
            code="SETTER_TYPE_MISMATCH",
            field=field,
            type_name=type_name,
            source=source,
        )
        self.context["setter"] = setter


# =============================================================================
# Configuration Exceptions
# =============================================================================


class MappingConfigurationException(ObjectMapperException):
    """The target type is unusable for mapping, whatever the input data."""


class UnknownTypeError(MappingConfigurationException):
    """The mapping target cannot be resolved to a reflectable class.

    Without a *reason* the class does not exist at all; with one, it exists
    but its annotations cannot be resolved.
    """

    def __init__(self, target: str, reason: str | None = None) -> None:
        self.target = target
        self.reason = reason
        message = f"Class {target} cannot be reflected: {reason}" if reason else f"Class {target} does not exist."
        super().__init__(
            message,
            code="UNKNOWN_TYPE",
            context={"type": target, **({"reason": reason} if reason else {})},
        )


class UnsupportedConstraintError(MappingConfigurationException):
    """A type annotation cannot be expressed as a validation constraint."""

    def __init__(self, description: str, *, field: str | None = None) -> None:
        self.description = description
        self.field = field
        where = f" on '{field}'" if field else ""
        super().__init__(
            f"Unsupported type annotation{where}: {description}",
            code="UNSUPPORTED_CONSTRAINT",
            context={"annotation": description, **({"field": field} if field else {})},
        )
