"""
Tests for mapping raw ABI lists to contract definitions
"""

import json
import logging

import pytest

from abibind.core.errors import MalformedTypeError, UnrecognizedEntryKindError
from abibind.core.models import AddressType, Artifact, BooleanType, UintType, VoidType
from abibind.parser import (
    AbiParser, determine_state_mutability, ensure_0x_prefix, is_constant_fn,
    is_simple_getter, map_contract,
)


def test_map_token_contract(token_abi):
    """Test a modern ABI maps to constructors, functions and events"""
    contract = map_contract("Token", token_abi, "0x6080")

    assert contract.name == "Token"
    assert len(contract.constructors) == 1
    assert [p.name for p in contract.constructors[0].inputs] == ["name", "symbol"]
    assert list(contract.functions) == ["totalSupply", "decimals", "balanceOf", "transfer", "getPosition"]
    assert list(contract.events) == ["Transfer"]
    assert contract.bytecode == "0x6080"
    assert json.loads(contract.abi_string) == token_abi


def test_function_parameters(token_abi):
    """Test inputs and outputs carry resolved types"""
    contract = map_contract("Token", token_abi, "0x6080")

    transfer = contract.functions["transfer"]
    assert transfer.mutability == "nonpayable"
    assert [(p.name, p.type) for p in transfer.inputs] == [("to", AddressType()), ("value", UintType(256))]
    assert [o.type for o in transfer.outputs] == [BooleanType()]


def test_event_arguments(token_abi):
    """Test event arguments keep their indexed flag"""
    contract = map_contract("Token", token_abi, "0x6080")

    transfer = contract.events["Transfer"]
    assert [(a.name, a.is_indexed) for a in transfer.inputs] == [("from", True), ("value", False)]


def test_empty_outputs_become_void():
    """Test a function without outputs gets one synthetic void output"""
    abi = [{"type": "function", "name": "poke", "inputs": [], "outputs": [], "stateMutability": "nonpayable"}]

    fn = map_contract("Poker", abi, "0x00").functions["poke"]

    assert len(fn.outputs) == 1
    assert fn.outputs[0].type == VoidType()
    assert not fn.outputs[0].name


@pytest.mark.parametrize("definition, expected", [
    ({"stateMutability": "pure", "constant": False}, "pure"),
    ({"constant": True}, "view"),
    ({"constant": True, "payable": True}, "view"),
    ({"constant": False, "payable": True}, "payable"),
    ({"constant": False, "payable": False}, "nonpayable"),
    ({}, "nonpayable"),
])
def test_mutability_fallback(definition, expected):
    """Test explicit mutability, then constant, then payable"""
    assert determine_state_mutability(definition) == expected


def test_legacy_abi(legacy_abi):
    """Test an old-style ABI with constant/payable flags and a fallback"""
    contract = map_contract("Vault", legacy_abi, "0x6080")

    assert contract.functions["owner"].mutability == "view"
    assert contract.functions["deposit"].mutability == "payable"
    assert contract.fallback is not None
    assert contract.fallback.name == "fallback"
    assert contract.fallback.mutability == "payable"
    assert contract.fallback.outputs[0].type == VoidType()
    assert "fallback" not in contract.functions


def test_overloads_keep_last_definition(caplog):
    """Test name collisions keep the last entry and warn"""
    abi = [
        {"type": "function", "name": "mint", "inputs": [{"name": "to", "type": "address"}],
         "outputs": [], "stateMutability": "nonpayable"},
        {"type": "function", "name": "mint",
         "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
         "outputs": [], "stateMutability": "nonpayable"},
    ]

    with caplog.at_level(logging.WARNING, logger="abibind.parser"):
        contract = map_contract("Minter", abi, "0x00")

    assert len(contract.functions) == 1
    assert [p.name for p in contract.functions["mint"].inputs] == ["to", "amount"]
    assert "overloaded function 'mint'" in caplog.text


def test_multiple_constructors_kept_in_order():
    """Test every constructor entry is preserved positionally"""
    abi = [
        {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
        {"type": "constructor", "inputs": [{"name": "x", "type": "uint8"}], "payable": True},
    ]

    contract = map_contract("Twice", abi, "0x00")

    assert len(contract.constructors) == 2
    assert contract.constructors[0].inputs == []
    assert contract.constructors[1].mutability == "payable"


def test_unknown_entry_kind():
    """Test unknown ABI entry types abort parsing"""
    abi = [{"type": "receive", "stateMutability": "payable"}]

    with pytest.raises(UnrecognizedEntryKindError) as exc_info:
        map_contract("Receiver", abi, "0x00")

    assert exc_info.value.kind == "receive"


def test_malformed_parameter_type():
    """Test a bad parameter type propagates"""
    abi = [{"type": "function", "name": "f", "inputs": [{"name": "x", "type": "fixed128x18"}],
            "outputs": [], "stateMutability": "pure"}]

    with pytest.raises(MalformedTypeError):
        AbiParser().parse_artifact(Artifact(name="F", abi=abi, bytecode="0x00"))


def test_simple_getter_classification(token_abi):
    """Test getters are read-only with no inputs and one output"""
    contract = map_contract("Token", token_abi, "0x6080")
    fns = contract.functions

    assert is_simple_getter(fns["totalSupply"])
    assert not is_simple_getter(fns["balanceOf"])
    assert is_constant_fn(fns["balanceOf"])
    assert is_constant_fn(fns["getPosition"])
    assert not is_simple_getter(fns["transfer"])
    assert not is_constant_fn(fns["transfer"])


def test_ensure_0x_prefix():
    """Test bytecode prefixing"""
    assert ensure_0x_prefix("6080") == "0x6080"
    assert ensure_0x_prefix("0x6080") == "0x6080"
