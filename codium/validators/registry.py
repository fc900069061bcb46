"""Registry that maps validator identifiers from lesson content to factories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Type, Union

from codium.core.content import CourseView

from .base import Validator

ValidatorFactory = Callable[[CourseView], Validator]


@dataclass(frozen=True)
class ValidatorBinding:
    """Pair a validator factory with the identifier lessons use to reference it."""

    name: str
    factory: ValidatorFactory
    description: str = ""


@dataclass(frozen=True)
class ResolvedValidator:
    binding: ValidatorBinding

    @property
    def name(self) -> str:
        return self.binding.name


@dataclass(frozen=True)
class UnresolvedValidator:
    name: str


ValidatorResolution = Union[ResolvedValidator, UnresolvedValidator]


class ValidatorRegistry:
    """Explicit identifier → factory table for all known validator variants."""

    def __init__(self) -> None:
        self._bindings: Dict[str, ValidatorBinding] = {}

    def register(self, binding: ValidatorBinding) -> None:
        name = binding.name.strip()
        if not name:
            raise ValueError("Validator binding needs a non-empty name")
        if name in self._bindings:
            raise ValueError(f"Validator {name} already registered")
        self._bindings[name] = binding

    def register_class(self, validator_cls: Type[Validator], *, name: str | None = None) -> None:
        if not (isinstance(validator_cls, type) and issubclass(validator_cls, Validator)):
            raise TypeError(f"{validator_cls!r} does not implement the Validator capability")
        self.register(
            ValidatorBinding(
                name=name or validator_cls.name or validator_cls.__name__,
                factory=validator_cls,
                description=validator_cls.description,
            )
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def names(self) -> List[str]:
        return sorted(self._bindings)

    def describe(self) -> Mapping[str, str]:
        return {name: self._bindings[name].description for name in self.names()}

    def resolve(self, name: str | None) -> ValidatorResolution:
        """Pure lookup; unknown or blank identifiers resolve to `UnresolvedValidator`."""
        key = (name or "").strip()
        binding = self._bindings.get(key)
        if binding is None:
            return UnresolvedValidator(name=key)
        return ResolvedValidator(binding=binding)

    def build(self, name: str, view: CourseView) -> Validator:
        resolution = self.resolve(name)
        if isinstance(resolution, UnresolvedValidator):
            raise KeyError(f"No validator registered under {resolution.name!r}")
        validator = resolution.binding.factory(view)
        if not isinstance(validator, Validator):
            raise TypeError(f"Factory for {resolution.name} returned {type(validator).__name__}, not a Validator")
        return validator


__all__ = [
    "ResolvedValidator",
    "UnresolvedValidator",
    "ValidatorBinding",
    "ValidatorFactory",
    "ValidatorRegistry",
    "ValidatorResolution",
]
