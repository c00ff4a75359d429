"""abi_export — Solidity interface generator for typed contract entities."""

__all__ = [
    "__version__",
    "GenerateAbi",
    "FormatError",
    "print_abi",
    "abi_to_string",
    "underscore_if_sol",
    "Interface",
    "Function",
    "Param",
    "StateMutability",
]
__version__ = "0.1.0"

from abi_export.escape import underscore_if_sol  # noqa: E402, F401
from abi_export.export import (  # noqa: E402, F401
    FormatError,
    GenerateAbi,
    abi_to_string,
    print_abi,
)
from abi_export.solidity import (  # noqa: E402, F401
    Function,
    Interface,
    Param,
    StateMutability,
)
