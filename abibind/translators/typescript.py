"""
Rendering of semantic Solidity types as TypeScript (ethers v4) types.

Two renderings exist for the same type tree:
- input types, for values the caller passes in (``BigNumberish``, ``Arrayish``)
- output types, for values the contract returns (``number``/``BigNumber``, ``string``)

Event filters reuse the input rendering for indexed arguments only.
"""

from typing import Callable, List, Sequence, Union

from ..core.config import NATIVE_NUMBER_MAX_BITS, TS_INPUT_TYPES, TS_NULL, TS_OUTPUT_TYPES
from ..core.models import (
    AddressType, ArrayType, BooleanType, ByteType, DynamicBytesType, FixedBytesType,
    IntType, SolidityEventArgument, SolidityOutputParameter, SolidityParameter,
    SoliditySymbol, SolidityType, StringType, TupleType, UintType, VoidType,
)


def render_input_type(solidity_type: SolidityType) -> str:
    """TypeScript type accepted for a caller-supplied value"""
    if isinstance(solidity_type, (UintType, IntType)):
        return TS_INPUT_TYPES["int"]
    if isinstance(solidity_type, AddressType):
        return TS_INPUT_TYPES["address"]
    if isinstance(solidity_type, StringType):
        return TS_INPUT_TYPES["string"]
    if isinstance(solidity_type, (ByteType, FixedBytesType, DynamicBytesType)):
        return TS_INPUT_TYPES["bytes"]
    if isinstance(solidity_type, BooleanType):
        return TS_INPUT_TYPES["bool"]
    if isinstance(solidity_type, VoidType):
        return TS_INPUT_TYPES["void"]
    if isinstance(solidity_type, ArrayType):
        return f"(Array<{render_input_type(solidity_type.item_type)}>)"
    if isinstance(solidity_type, TupleType):
        return render_tuple_type(solidity_type, render_input_type)
    raise TypeError(f"Unsupported type node: {solidity_type!r}")


def render_output_type(solidity_type: SolidityType) -> str:
    """TypeScript type of a value returned by the contract"""
    if isinstance(solidity_type, (UintType, IntType)):
        if solidity_type.bits <= NATIVE_NUMBER_MAX_BITS:
            return TS_OUTPUT_TYPES["native_int"]
        return TS_OUTPUT_TYPES["big_int"]
    if isinstance(solidity_type, AddressType):
        return TS_OUTPUT_TYPES["address"]
    if isinstance(solidity_type, StringType):
        return TS_OUTPUT_TYPES["string"]
    if isinstance(solidity_type, (ByteType, FixedBytesType, DynamicBytesType)):
        return TS_OUTPUT_TYPES["bytes"]
    if isinstance(solidity_type, BooleanType):
        return TS_OUTPUT_TYPES["bool"]
    if isinstance(solidity_type, VoidType):
        return TS_OUTPUT_TYPES["void"]
    if isinstance(solidity_type, ArrayType):
        return f"(Array<{render_output_type(solidity_type.item_type)}>)"
    if isinstance(solidity_type, TupleType):
        return render_tuple_type(solidity_type, render_output_type)
    raise TypeError(f"Unsupported type node: {solidity_type!r}")


def render_tuple_type(tuple_type: TupleType, render: Callable[[SolidityType], str]) -> str:
    """Object type with one property per tuple member, rendered with `render`"""
    members = ", ".join(
        f"{param_name(component, index)}: {render(component.type)}"
        for index, component in enumerate(tuple_type.components)
    )
    return "{" + members + "}"


def render_event_arg_type(arg: SolidityEventArgument) -> str:
    """Only indexed arguments can be filtered on; the rest keep a `null` slot"""
    if arg.is_indexed:
        return f"{render_input_type(arg.type)} | {TS_NULL}"
    return TS_NULL


def render_output_types(outputs: Sequence[SolidityOutputParameter]) -> str:
    """
    Return type of a call.

    A single output is returned as-is. Several outputs come back as an ethers
    Result, addressable both by name (when named) and by position.
    """
    if len(outputs) == 1:
        return render_output_type(outputs[0].type)

    named = "".join(
        f"{output.name}: {render_output_type(output.type)}, "
        for output in outputs
        if output.name
    )
    positional = ", ".join(
        f"{index}: {render_output_type(output.type)}"
        for index, output in enumerate(outputs)
    )
    return "{ " + named + positional + " }"


def param_name(param: Union[SolidityParameter, SolidityEventArgument, SoliditySymbol], index: int) -> str:
    return param.name or f"arg{index}"


def render_input_params(params: Sequence[SolidityParameter]) -> str:
    """`name: Type` list for a call signature"""
    return ", ".join(
        f"{param_name(param, index)}: {render_input_type(param.type)}"
        for index, param in enumerate(params)
    )


def render_param_names(params: Sequence[Union[SolidityParameter, SolidityEventArgument]]) -> str:
    return ", ".join(param_name(param, index) for index, param in enumerate(params))


def render_param_array_types(params: Sequence[SolidityParameter]) -> str:
    return "[" + ", ".join(render_input_type(param.type) for param in params) + "]"


def render_event_params(args: Sequence[SolidityEventArgument]) -> str:
    """`name: Type | null` list for an event filter"""
    return ", ".join(
        f"{param_name(arg, index)}: {render_event_arg_type(arg)}"
        for index, arg in enumerate(args)
    )


def render_event_topic_types(args: Sequence[SolidityEventArgument]) -> str:
    parts: List[str] = [render_event_arg_type(arg) for arg in args]
    return "[" + ", ".join(parts) + "]"
