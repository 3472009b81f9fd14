"""Dialect descriptors for every supported surface language."""

from __future__ import annotations

import importlib
import logging

from ._base import Dialect
from .. import constants

logger = logging.getLogger(__name__)

# Lazy imports to avoid loading every parser/analyzer at startup
_DIALECT_MODULES: dict[str, str] = {
    constants.DIALECT_JAVASCRIPT: "javascript.JAVASCRIPT",
    constants.DIALECT_C: "c.C",
    constants.DIALECT_JAVA: "java.JAVA",
}


def resolve_dialect_name(name: str) -> str:
    """Map aliases such as ``ts`` onto their canonical dialect name."""
    lowered = name.strip().lower()
    return constants.DIALECT_ALIASES.get(lowered, lowered)


def get_dialect(name: str) -> Dialect:
    """Return the descriptor registered for *name*.

    Raises ``ValueError`` if *name* is not a supported dialect.
    """
    canonical = resolve_dialect_name(name)
    entry = _DIALECT_MODULES.get(canonical)
    if entry is None:
        raise ValueError(f"Unsupported dialect: {name}")
    module_name, attr = entry.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    logger.debug("Resolved dialect %r -> %s", name, canonical)
    return getattr(mod, attr)


SUPPORTED_DIALECTS: tuple[str, ...] = tuple(_DIALECT_MODULES.keys())

__all__ = [
    "Dialect",
    "get_dialect",
    "resolve_dialect_name",
    "SUPPORTED_DIALECTS",
]
