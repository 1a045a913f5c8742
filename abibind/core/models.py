"""
Data models for ABI types, contract definitions and generated files
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union


# Semantic Solidity types

@dataclass(frozen=True)
class VoidType:
    """Synthetic type for functions that return nothing"""


@dataclass(frozen=True)
class BooleanType:
    pass


@dataclass(frozen=True)
class AddressType:
    pass


@dataclass(frozen=True)
class StringType:
    pass


@dataclass(frozen=True)
class ByteType:
    pass


@dataclass(frozen=True)
class DynamicBytesType:
    pass


@dataclass(frozen=True)
class FixedBytesType:
    """bytes<N>; size is the byte count N"""
    size: int


@dataclass(frozen=True)
class UintType:
    bits: int


@dataclass(frozen=True)
class IntType:
    bits: int


@dataclass(frozen=True)
class ArrayType:
    """Array of item_type; size is None for dynamic arrays"""
    item_type: "SolidityType"
    size: Optional[int] = None


@dataclass(frozen=True)
class SoliditySymbol:
    """Named member of a tuple"""
    name: str
    type: "SolidityType"


@dataclass(frozen=True)
class TupleType:
    is_struct: bool
    components: Tuple[SoliditySymbol, ...]


SolidityType = Union[
    VoidType, BooleanType, AddressType, StringType, ByteType, DynamicBytesType,
    FixedBytesType, UintType, IntType, ArrayType, TupleType,
]


# Contract definitions

MUTABILITIES = ("pure", "view", "payable", "nonpayable")


@dataclass
class SolidityParameter:
    name: str
    type: SolidityType


@dataclass
class SolidityOutputParameter:
    type: SolidityType
    name: Optional[str] = None


@dataclass
class SolidityFunction:
    name: str
    mutability: str  # one of MUTABILITIES
    inputs: List[SolidityParameter]
    outputs: List[SolidityOutputParameter]


@dataclass
class SolidityEventArgument:
    name: str
    type: SolidityType
    is_indexed: bool


@dataclass
class SolidityEvent:
    name: str
    inputs: List[SolidityEventArgument]


@dataclass
class Constructor:
    mutability: str
    inputs: List[SolidityParameter]
    name: str = "constructor"


@dataclass
class Contract:
    """Per-contract intermediate representation consumed by the generators"""
    name: str
    constructors: List[Constructor]
    functions: Dict[str, SolidityFunction]
    events: Dict[str, SolidityEvent]
    abi_string: str
    bytecode: str
    fallback: Optional[SolidityFunction] = None


# Pipeline records

@dataclass
class Artifact:
    """Compiled contract: logical name, raw ABI list and bytecode hex"""
    name: str
    abi: List[Dict[str, Any]]
    bytecode: str


@dataclass
class GeneratedUnit:
    """One generated file: file name and body text"""
    name: str
    body: str


@dataclass
class Options:
    """Where to read artifacts from and where to put the bindings"""
    pattern: str
    out_dir: str
