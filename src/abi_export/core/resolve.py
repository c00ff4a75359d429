"""Resolve ``module:Name`` export targets to entity classes."""

from __future__ import annotations

import importlib
import logging

from abi_export.export import GenerateAbi

_logger = logging.getLogger(__name__)


class TargetError(Exception):
    """The export target cannot be imported or is not an exportable entity."""


def is_exportable(obj: object) -> bool:
    """Return True if *obj* is a class with a ``str`` NAME and a ``fmt_abi``."""
    return (
        isinstance(obj, type)
        and isinstance(getattr(obj, "NAME", None), str)
        and callable(getattr(obj, "fmt_abi", None))
    )


def resolve_target(target: str) -> type[GenerateAbi]:
    """Import ``pkg.module:Name`` and return the named entity class.

    Dotted attribute paths (``pkg.module:Outer.Inner``) are followed.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetError(f"expected 'module:Name', got {target!r}")

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetError(f"cannot import module {module_name!r}: {exc}") from exc
    except Exception as exc:
        raise TargetError(
            f"error while importing module {module_name!r}: {type(exc).__name__}: {exc}"
        ) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise TargetError(
                f"module {module_name!r} has no attribute {attr_path!r}"
            ) from None

    if not is_exportable(obj):
        raise TargetError(f"{target!r} does not define NAME and fmt_abi()")

    _logger.debug("resolved %s -> %r", target, obj)
    return obj  # type: ignore[return-value]
