"""
Parser that maps a contract's raw ABI list to its intermediate representation.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .core.errors import UnrecognizedEntryKindError
from .core.models import (
    Artifact, Constructor, Contract, SolidityEvent, SolidityEventArgument,
    SolidityFunction, SolidityOutputParameter, SolidityParameter, VoidType,
)
from .translators.solidity_types import parse_abi_parameter_type

logger = logging.getLogger(__name__)

READ_ONLY_MUTABILITIES = ("pure", "view")


class AbiParser:
    """Parse artifact ABIs into Contract definitions"""

    def parse_artifact(self, artifact: Artifact) -> Contract:
        """
        Map every ABI entry of an artifact.

        Args:
            artifact: Artifact with name, raw ABI list and bytecode

        Returns:
            Contract IR. Functions and events are keyed by name; when a name
            repeats (overloads) the last entry wins.

        Raises:
            UnrecognizedEntryKindError: If an entry's type is not
                constructor, function, event or fallback
            MalformedTypeError: If a parameter type cannot be resolved
        """
        constructors: List[Constructor] = []
        functions: Dict[str, SolidityFunction] = {}
        events: Dict[str, SolidityEvent] = {}
        fallback: Optional[SolidityFunction] = None

        for definition in artifact.abi:
            kind = definition.get("type")
            if kind == "constructor":
                constructors.append(self._parse_constructor(definition))
            elif kind == "function":
                fn = self._parse_function(definition)
                if fn.name in functions:
                    logger.warning("%s: overloaded function %r, keeping the last definition",
                                   artifact.name, fn.name)
                functions[fn.name] = fn
            elif kind == "event":
                event = self._parse_event(definition)
                if event.name in events:
                    logger.warning("%s: overloaded event %r, keeping the last definition",
                                   artifact.name, event.name)
                events[event.name] = event
            elif kind == "fallback":
                fallback = self._parse_fallback(definition)
            else:
                raise UnrecognizedEntryKindError(kind)

        return Contract(
            name=artifact.name,
            constructors=constructors,
            functions=functions,
            events=events,
            fallback=fallback,
            abi_string=json.dumps(artifact.abi, separators=(",", ":")),
            bytecode=ensure_0x_prefix(artifact.bytecode),
        )

    def _parse_function(self, definition: Dict[str, Any]) -> SolidityFunction:
        return SolidityFunction(
            name=definition.get("name", ""),
            inputs=[self._parse_parameter(p) for p in definition.get("inputs") or []],
            outputs=self._parse_outputs(definition.get("outputs")),
            mutability=determine_state_mutability(definition),
        )

    def _parse_constructor(self, definition: Dict[str, Any]) -> Constructor:
        return Constructor(
            inputs=[self._parse_parameter(p) for p in definition.get("inputs") or []],
            mutability=determine_state_mutability(definition),
        )

    def _parse_fallback(self, definition: Dict[str, Any]) -> SolidityFunction:
        return SolidityFunction(
            name="fallback",
            inputs=[],
            outputs=self._parse_outputs(definition.get("outputs")),
            mutability=determine_state_mutability(definition),
        )

    def _parse_event(self, definition: Dict[str, Any]) -> SolidityEvent:
        return SolidityEvent(
            name=definition.get("name", ""),
            inputs=[
                SolidityEventArgument(
                    name=arg.get("name", ""),
                    type=parse_abi_parameter_type(arg),
                    is_indexed=bool(arg.get("indexed", False)),
                )
                for arg in definition.get("inputs") or []
            ],
        )

    def _parse_outputs(self, outputs: Optional[List[Dict[str, Any]]]) -> List[SolidityOutputParameter]:
        # Generators always see at least one output
        if not outputs:
            return [SolidityOutputParameter(name="", type=VoidType())]
        return [
            SolidityOutputParameter(name=output.get("name", ""), type=parse_abi_parameter_type(output))
            for output in outputs
        ]

    def _parse_parameter(self, param: Dict[str, Any]) -> SolidityParameter:
        return SolidityParameter(name=param.get("name", ""), type=parse_abi_parameter_type(param))


def map_contract(name: str, abi: List[Dict[str, Any]], bytecode: str) -> Contract:
    """Shortcut for AbiParser().parse_artifact(Artifact(name, abi, bytecode))"""
    return AbiParser().parse_artifact(Artifact(name=name, abi=abi, bytecode=bytecode))


def determine_state_mutability(definition: Dict[str, Any]) -> str:
    """
    Mutability of an ABI entry.

    Older ABIs have no ``stateMutability`` and encode it with the
    ``constant`` and ``payable`` flags instead.
    """
    if definition.get("stateMutability"):
        return definition["stateMutability"]
    if definition.get("constant"):
        return "view"
    return "payable" if definition.get("payable") else "nonpayable"


def is_simple_getter(fn: SolidityFunction) -> bool:
    """Read-only, no inputs, exactly one output"""
    return (
        fn.mutability in READ_ONLY_MUTABILITIES
        and len(fn.inputs) == 0
        and len(fn.outputs) == 1
    )


def is_constant_fn(fn: SolidityFunction) -> bool:
    """Read-only but not a simple getter"""
    return fn.mutability in READ_ONLY_MUTABILITIES and not is_simple_getter(fn)


def ensure_0x_prefix(hex_string: str) -> str:
    return hex_string if hex_string.startswith("0x") else "0x" + hex_string
