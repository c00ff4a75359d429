"""Solidity interface entities.

Contracts and their exported functions are declared as classes; the class
itself is the entity and carries no instance state::

    class Transfer(Function):
        NAME = "transfer"
        INPUTS = (Param("address", "to"), Param("uint256", "amount"))
        OUTPUTS = (Param("bool"),)

    class Token(Interface):
        NAME = "Token"
        FUNCTIONS = (Transfer,)

``abi_to_string(Token)`` then yields::

    interface Token {
        function transfer(address to, uint256 amount) external returns (bool);
    }

``function()`` and ``interface()`` build the same classes from plain values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, TextIO

from abi_export.escape import underscore_if_sol
from abi_export.export import GenerateAbi, write_fragment

INDENT = "    "

_DYNAMIC_BASE_TYPES = frozenset({"string", "bytes"})
_ARRAY_SUFFIX = re.compile(r"\[[0-9]*\]$")


class StateMutability(str, Enum):
    """How a function may touch contract state."""

    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"

    @property
    def suffix(self) -> str:
        # nonpayable is Solidity's default and is never spelled out
        if self is StateMutability.NONPAYABLE:
            return ""
        return f" {self.value}"


def is_dynamic(ty: str) -> bool:
    """Return True if values of *ty* need a data location in an interface."""
    return ty in _DYNAMIC_BASE_TYPES or _ARRAY_SUFFIX.search(ty) is not None


@dataclass(frozen=True, slots=True)
class Param:
    """A function input or output: a Solidity type and an optional label."""

    type: str
    name: str = ""

    def render(self, location: str) -> str:
        loc = f" {location}" if is_dynamic(self.type) else ""
        return f"{self.type}{loc}{underscore_if_sol(self.name)}"


def _render_params(params: Iterable[Param], location: str) -> str:
    return ", ".join(p.render(location) for p in params)


class Function:
    """An externally callable function of an interface."""

    NAME: ClassVar[str] = ""
    INPUTS: ClassVar[tuple[Param, ...]] = ()
    OUTPUTS: ClassVar[tuple[Param, ...]] = ()
    MUTABILITY: ClassVar[StateMutability] = StateMutability.NONPAYABLE

    @classmethod
    def fmt_abi(cls, f: TextIO) -> None:
        line = (
            f"{INDENT}function {cls.NAME}({_render_params(cls.INPUTS, 'calldata')})"
            f" external{cls.MUTABILITY.suffix}"
        )
        if cls.OUTPUTS:
            line += f" returns ({_render_params(cls.OUTPUTS, 'memory')})"
        write_fragment(f, line + ";\n")


class Interface:
    """A whole contract interface: a header, its functions, a closing brace."""

    NAME: ClassVar[str] = ""
    INHERITS: ClassVar[tuple[str, ...]] = ()
    FUNCTIONS: ClassVar[tuple[type[GenerateAbi], ...]] = ()

    @classmethod
    def fmt_abi(cls, f: TextIO) -> None:
        is_clause = f" is {', '.join(cls.INHERITS)}" if cls.INHERITS else ""
        write_fragment(f, f"interface {cls.NAME}{is_clause} {{\n")
        for i, func in enumerate(cls.FUNCTIONS):
            if i:
                write_fragment(f, "\n")
            func.fmt_abi(f)
        write_fragment(f, "}\n")


# ── factories ───────────────────────────────────────────────────────


def _class_name(name: str, suffix: str) -> str:
    head = re.sub(r"[^0-9A-Za-z_]", "_", name) or "Anonymous"
    return f"{head[:1].upper()}{head[1:]}{suffix}"


def function(
    name: str,
    inputs: Iterable[Param] = (),
    outputs: Iterable[Param] = (),
    mutability: StateMutability | str = StateMutability.NONPAYABLE,
) -> type[Function]:
    """Build a ``Function`` entity class."""
    return type(
        _class_name(name, "Function"),
        (Function,),
        {
            "NAME": name,
            "INPUTS": tuple(inputs),
            "OUTPUTS": tuple(outputs),
            "MUTABILITY": StateMutability(mutability),
        },
    )


def interface(
    name: str,
    functions: Iterable[type[GenerateAbi]] = (),
    inherits: Iterable[str] = (),
) -> type[Interface]:
    """Build an ``Interface`` entity class; *functions* keep their order."""
    return type(
        _class_name(name, "Interface"),
        (Interface,),
        {
            "NAME": name,
            "INHERITS": tuple(inherits),
            "FUNCTIONS": tuple(functions),
        },
    )
