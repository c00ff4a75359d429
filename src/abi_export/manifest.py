"""Load interface entities from a JSON or YAML manifest.

Usage::

    from abi_export.manifest import load_manifest

    Token = load_manifest(Path("token.yaml"))
    print_abi(Token)

A manifest describes one interface::

    name: Token
    inherits: [IERC165]
    functions:
      - name: transfer
        inputs: [{type: address, name: to}, {type: uint256, name: amount}]
        outputs: [{type: bool}]
      - name: balanceOf
        inputs: [{type: address, name: owner}]
        outputs: [{type: uint256}]
        state_mutability: view
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from abi_export.solidity import Interface, Param, function, interface

_logger = logging.getLogger(__name__)

SCHEMA_DIR = "data/schemas"
MANIFEST_SCHEMA = "abi_manifest.schema.json"

_YAML_SUFFIXES = (".yaml", ".yml")


class ManifestError(Exception):
    """The manifest file could not be read or parsed."""


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/abi_export/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parent / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(
        resources.files("abi_export") / SCHEMA_DIR / name
    ) as p:
        return p


def load_schema(name: str = MANIFEST_SCHEMA) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def validate_manifest(data: Any) -> None:
    """Validate *data* against the manifest schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    jsonschema.validate(instance=data, schema=load_schema())


def parse_manifest(text: str, *, fmt: str = "json") -> Any:
    """Parse manifest *text* as ``json`` or ``yaml``."""
    try:
        if fmt == "yaml":
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ManifestError(f"cannot parse {fmt} manifest: {exc}") from exc


def _params(items: list[dict[str, str]]) -> tuple[Param, ...]:
    return tuple(Param(type=p["type"], name=p.get("name", "")) for p in items)


def build_interface(data: dict[str, Any]) -> type[Interface]:
    """Validate *data* and build the ``Interface`` entity it describes."""
    validate_manifest(data)
    functions = [
        function(
            fn["name"],
            inputs=_params(fn.get("inputs", [])),
            outputs=_params(fn.get("outputs", [])),
            mutability=fn.get("state_mutability", "nonpayable"),
        )
        for fn in data.get("functions", [])
    ]
    _logger.debug(
        "built interface %s with %d function(s)", data["name"], len(functions)
    )
    return interface(
        data["name"],
        functions=functions,
        inherits=data.get("inherits", []),
    )


def load_manifest(path: Path) -> type[Interface]:
    """Read a ``.json``/``.yaml``/``.yml`` manifest and build its interface."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"cannot read manifest {path}: {exc}") from exc

    fmt = "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"
    return build_interface(parse_manifest(text, fmt=fmt))
