"""Tests for solidity — Function and Interface entity rendering."""

from __future__ import annotations

import io

import pytest

from abi_export.export import FormatError, abi_to_string
from abi_export.solidity import (
    Function,
    Interface,
    Param,
    StateMutability,
    function,
    interface,
    is_dynamic,
)


class Transfer(Function):
    NAME = "transfer"
    INPUTS = (Param("address", "to"), Param("uint256", "amount"))
    OUTPUTS = (Param("bool"),)


class BalanceOf(Function):
    NAME = "balanceOf"
    INPUTS = (Param("address", "address"),)
    OUTPUTS = (Param("uint256"),)
    MUTABILITY = StateMutability.VIEW


class Token(Interface):
    NAME = "Token"
    FUNCTIONS = (Transfer, BalanceOf)


class TestParam:
    def test_named(self) -> None:
        assert Param("uint256", "amount").render("calldata") == "uint256 amount"

    def test_unnamed(self) -> None:
        assert Param("bool").render("memory") == "bool"

    def test_reserved_label_escaped(self) -> None:
        assert Param("uint8", "uint8").render("calldata") == "uint8 _uint8"
        assert Param("address", "contract").render("calldata") == "address _contract"

    @pytest.mark.parametrize("ty", ["string", "bytes", "uint256[]", "address[4]", "bytes32[][]"])
    def test_dynamic_types_carry_location(self, ty: str) -> None:
        assert is_dynamic(ty)
        assert Param(ty, "data").render("calldata") == f"{ty} calldata data"

    @pytest.mark.parametrize("ty", ["bytes32", "uint256", "address", "bool"])
    def test_static_types_have_no_location(self, ty: str) -> None:
        assert not is_dynamic(ty)


class TestFunction:
    def test_nonpayable_with_returns(self) -> None:
        assert abi_to_string(Transfer) == (
            "    function transfer(address to, uint256 amount) external returns (bool);\n"
        )

    def test_view_with_escaped_param(self) -> None:
        assert abi_to_string(BalanceOf) == (
            "    function balanceOf(address _address) external view returns (uint256);\n"
        )

    @pytest.mark.parametrize(
        "mutability, suffix",
        [
            (StateMutability.PURE, " pure"),
            (StateMutability.VIEW, " view"),
            (StateMutability.NONPAYABLE, ""),
            (StateMutability.PAYABLE, " payable"),
        ],
    )
    def test_mutability_suffix(self, mutability: StateMutability, suffix: str) -> None:
        fn = function("poke", mutability=mutability)
        assert abi_to_string(fn) == f"    function poke() external{suffix};\n"

    def test_multiple_returns_use_memory_for_dynamic(self) -> None:
        fn = function(
            "info",
            outputs=[Param("string", "name"), Param("uint8", "decimals")],
            mutability="view",
        )
        assert abi_to_string(fn) == (
            "    function info() external view returns (string memory name, uint8 decimals);\n"
        )

    def test_factory_rejects_unknown_mutability(self) -> None:
        with pytest.raises(ValueError):
            function("poke", mutability="constant")


class TestInterface:
    def test_declaration_order_and_spacing(self) -> None:
        assert abi_to_string(Token) == (
            "interface Token {\n"
            "    function transfer(address to, uint256 amount) external returns (bool);\n"
            "\n"
            "    function balanceOf(address _address) external view returns (uint256);\n"
            "}\n"
        )

    def test_order_is_not_sorted(self) -> None:
        reversed_token = interface("Token", functions=[BalanceOf, Transfer])
        text = abi_to_string(reversed_token)
        assert text.index("balanceOf") < text.index("transfer")

    def test_inherits(self) -> None:
        entity = interface("Token", functions=[], inherits=["IERC20", "IERC165"])
        assert abi_to_string(entity) == "interface Token is IERC20, IERC165 {\n}\n"

    def test_factory_builds_tag_class(self) -> None:
        entity = interface("my-token", functions=[Transfer])
        assert isinstance(entity, type)
        assert issubclass(entity, Interface)
        assert entity.NAME == "my-token"
        assert entity.__name__ == "My_tokenInterface"

    def test_failure_stops_remaining_functions(self) -> None:
        rendered: list[str] = []

        class Broken(Function):
            NAME = "broken"

            @classmethod
            def fmt_abi(cls, f) -> None:
                rendered.append(cls.NAME)
                raise FormatError("sink closed")

        class After(Function):
            NAME = "after"

            @classmethod
            def fmt_abi(cls, f) -> None:
                rendered.append(cls.NAME)

        entity = interface("Partial", functions=[Broken, After])
        sink = io.StringIO()
        with pytest.raises(FormatError):
            entity.fmt_abi(sink)
        assert rendered == ["broken"]
        assert sink.getvalue() == "interface Partial {\n"
