"""Validator capability, built-in variants and the identifier registry."""

from .base import EditorSnapshot, Validator, Verdict
from .defaults import build_default_registry
from .registry import (
    ResolvedValidator,
    UnresolvedValidator,
    ValidatorBinding,
    ValidatorRegistry,
    ValidatorResolution,
)

__all__ = [
    "EditorSnapshot",
    "ResolvedValidator",
    "UnresolvedValidator",
    "Validator",
    "ValidatorBinding",
    "ValidatorRegistry",
    "ValidatorResolution",
    "Verdict",
    "build_default_registry",
]
