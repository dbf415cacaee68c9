"""Variant loader for 4x6 label layouts."""

from __future__ import annotations

from typing import Iterable
from importlib import import_module

from .base import FormField, LabelVariant

__all__ = ["FormField", "LabelVariant", "get_variant", "list_variants"]

_VARIANT_MODULES = {
    "standard": "standard",
    "equipment": "equipment_tag",
}


def get_variant(name: str) -> LabelVariant:
    """Instantiate the variant implementation for ``name``."""

    key = name.strip().lower()
    if key not in _VARIANT_MODULES:
        available = ", ".join(sorted(_VARIANT_MODULES))
        raise SystemExit(
            f"Unknown label variant '{name}'. Available variants: {available}"
        )

    module = import_module(f"{__name__}.{_VARIANT_MODULES[key]}")

    variant_cls: type[LabelVariant] | None = getattr(module, "Variant", None)
    if not variant_cls or not issubclass(variant_cls, LabelVariant):
        raise SystemExit(
            f"Label variant '{name}' does not export a valid Variant class"
        )

    return variant_cls()


def list_variants() -> Iterable[str]:
    """Return the variant identifiers."""

    return sorted(_VARIANT_MODULES)
