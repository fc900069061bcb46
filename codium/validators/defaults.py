"""Default validator registry wiring for the viewer."""

from __future__ import annotations

from typing import Iterable, Type

from .base import Validator
from .builtin import NonEmptyCodeValidator, RequiredTokensValidator, SolutionMatchValidator
from .registry import ValidatorRegistry

BUILTIN_VALIDATORS: tuple[Type[Validator], ...] = (
    NonEmptyCodeValidator,
    SolutionMatchValidator,
    RequiredTokensValidator,
)


def build_default_registry(*, extra: Iterable[Type[Validator]] = ()) -> ValidatorRegistry:
    """Register the built-in validators plus any content-supplied variants."""

    registry = ValidatorRegistry()
    for validator_cls in (*BUILTIN_VALIDATORS, *extra):
        registry.register_class(validator_cls)
    return registry
