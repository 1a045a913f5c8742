"""
Resolution of raw ABI type descriptors into semantic Solidity types
"""

from typing import Any, Dict, List, Optional, Sequence

from ..core.errors import MalformedTypeError, MissingTupleComponentsError
from ..core.models import (
    AddressType, ArrayType, BooleanType, ByteType, DynamicBytesType, FixedBytesType,
    IntType, SolidityType, SoliditySymbol, StringType, TupleType, UintType,
)

KEYWORD_TYPES = {
    "bool": BooleanType(),
    "address": AddressType(),
    "string": StringType(),
    "byte": ByteType(),
    "bytes": DynamicBytesType(),
}

# prefix -> (constructor, default suffix); uint before int
PREFIXED_TYPES = (
    ("uint", UintType, 256),
    ("int", IntType, 256),
    ("bytes", FixedBytesType, 1),
)


def parse_solidity_type(raw: str,
                        components: Optional[Sequence[SoliditySymbol]] = None,
                        internal_type: Optional[str] = None) -> SolidityType:
    """
    Parse an ABI type descriptor such as ``uint256[2][]`` or ``tuple``.

    Args:
        raw: The descriptor from the ABI ``type`` field
        components: Resolved tuple members, required when raw is (an array of) ``tuple``
        internal_type: The ABI ``internalType`` hint, e.g. ``struct Vault.Position``

    Returns:
        The semantic type

    Raises:
        MalformedTypeError: If the descriptor matches no known form
        MissingTupleComponentsError: If a tuple has no components
    """
    if not raw:
        raise MalformedTypeError(raw, "empty type descriptor")

    if raw[-1] == "]":
        return _parse_array_type(raw, components)

    if raw in KEYWORD_TYPES:
        return KEYWORD_TYPES[raw]

    if raw == "tuple":
        if components is None:
            raise MissingTupleComponentsError(raw)
        is_struct = internal_type is not None and internal_type.startswith("struct")
        return TupleType(is_struct=is_struct, components=tuple(components))

    for prefix, type_cls, default in PREFIXED_TYPES:
        if raw.startswith(prefix):
            return type_cls(_parse_suffix(raw, prefix, default))

    raise MalformedTypeError(raw)


def _parse_array_type(raw: str, components: Optional[Sequence[SoliditySymbol]]) -> ArrayType:
    """Peel the right-most ``[...]`` off raw; the rest is the item type."""
    open_index = raw.rfind("[", 0, len(raw) - 1)
    if open_index == -1:
        raise MalformedTypeError(raw, "unbalanced array brackets")

    size_raw = raw[open_index + 1:-1]
    if size_raw and not size_raw.isdecimal():
        raise MalformedTypeError(raw, f"invalid array length {size_raw!r}")
    size = int(size_raw) if size_raw else None

    item_type = parse_solidity_type(raw[:open_index], components)
    return ArrayType(item_type=item_type, size=size)


def _parse_suffix(raw: str, prefix: str, default: int) -> int:
    suffix = raw[len(prefix):]
    if not suffix:
        return default
    if not suffix.isdecimal():
        raise MalformedTypeError(raw)
    return int(suffix)


def parse_components(raw_components: Optional[List[Dict[str, Any]]]) -> Optional[List[SoliditySymbol]]:
    """Resolve the ``components`` list of a raw tuple parameter."""
    if raw_components is None:
        return None
    return [
        SoliditySymbol(name=component.get("name", ""), type=parse_abi_parameter_type(component))
        for component in raw_components
    ]


def parse_abi_parameter_type(param: Dict[str, Any]) -> SolidityType:
    """Resolve the type of one raw ABI parameter, including nested tuple members."""
    return parse_solidity_type(
        param.get("type", ""),
        parse_components(param.get("components")),
        param.get("internalType"),
    )
