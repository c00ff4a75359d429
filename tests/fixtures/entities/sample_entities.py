"""Entity classes used by the resolve and CLI tests."""

from abi_export.solidity import Function, Interface, Param, StateMutability


class Number(Function):
    NAME = "number"
    OUTPUTS = (Param("uint256"),)
    MUTABILITY = StateMutability.VIEW


class SetNumber(Function):
    NAME = "setNumber"
    INPUTS = (Param("uint256", "new_number"),)


class Increment(Function):
    NAME = "increment"


class Counter(Interface):
    NAME = "Counter"
    FUNCTIONS = (Number, SetNumber, Increment)


class Foo:
    NAME = "Foo"

    @classmethod
    def fmt_abi(cls, f):
        f.write("function foo() external;")


class Registry:
    Counter = Counter


NOT_AN_ENTITY = 42
