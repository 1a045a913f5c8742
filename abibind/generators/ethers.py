"""
TypeScript (ethers v4) binding generation for a single contract
"""

from typing import List

from ..core.models import Contract, GeneratedUnit, SolidityEvent, SolidityFunction
from ..parser import is_constant_fn, is_simple_getter
from ..translators.typescript import (
    render_event_params, render_event_topic_types, render_input_params,
    render_output_types, render_param_array_types, render_param_names,
)

HEADER = [
    'import { Contract, ContractFactory, ContractTransaction, EventFilter, Signer } from "ethers";',
    'import { Listener, Provider } from "ethers/providers";',
    'import { Arrayish, BigNumber, BigNumberish, Interface, UnsignedTransaction } from "ethers/utils";',
    "import {",
    "  TransactionOverrides, TypedFunctionDescription, TypedEventDescription,",
    "  awaitContractDeployment, DeploymentOverrides",
    '} from ".";',
]


def has_constructor_parameters(contract: Contract) -> bool:
    constructors = contract.constructors
    return len(constructors) > 0 and len(constructors[0].inputs) > 0


def generate_function(fn: SolidityFunction) -> str:
    """Method signature on the contract interface"""
    read_only = fn.mutability in ("pure", "view")
    output_type = render_output_types(fn.outputs) if read_only else "ContractTransaction"

    params = render_input_params(fn.inputs)
    if not is_simple_getter(fn) and not is_constant_fn(fn):
        params += ", " if params else ""
        params += "overrides?: TransactionOverrides"

    return f"{fn.name}({params}): Promise<{output_type}>;"


def generate_estimate_function(fn: SolidityFunction) -> str:
    return f"{fn.name}({render_input_params(fn.inputs)}): Promise<BigNumber>;"


def generate_event(event: SolidityEvent) -> str:
    """Filter factory; non-indexed arguments can only be `null`"""
    return f"{event.name}({render_event_params(event.inputs)}): EventFilter;"


def generate_interface_function_description(fn: SolidityFunction) -> str:
    return (
        f"{fn.name}: TypedFunctionDescription<{{ encode([{render_param_names(fn.inputs)}]: "
        f"{render_param_array_types(fn.inputs)}): string; }}>;"
    )


def generate_interface_event_description(event: SolidityEvent) -> str:
    return (
        f"{event.name}: TypedEventDescription<{{ encodeTopics([{render_param_names(event.inputs)}]: "
        f"{render_event_topic_types(event.inputs)}): string[]; }}>;"
    )


def _quote(text: str) -> str:
    """Single-quoted TypeScript string literal"""
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _indent(lines: List[str], level: int) -> List[str]:
    pad = "  " * level
    return [pad + line if line else line for line in lines]


def generate_ethers(contract: Contract) -> GeneratedUnit:
    """
    Generate the TypeScript binding for one contract.

    The output depends only on the contract IR, so the same contract always
    produces the same text.

    Args:
        contract: Contract IR from the ABI parser

    Returns:
        GeneratedUnit named ``<Contract>.ts``
    """
    name = contract.name
    functions = list(contract.functions.values())
    events = list(contract.events.values())

    if has_constructor_parameters(contract):
        ctor_inputs = contract.constructors[0].inputs
        ctor_params = ", " + render_input_params(ctor_inputs)
        ctor_names = render_param_names(ctor_inputs)
        ctor_call_names = ", " + ctor_names
    else:
        ctor_params = ""
        ctor_names = ""
        ctor_call_names = ""

    lines: List[str] = list(HEADER)
    lines.append("")

    # Typed Interface
    lines.append(f"interface {name}Interface extends Interface {{")
    lines.append("  functions: {")
    lines.extend(_indent([generate_interface_function_description(fn) for fn in functions], 2))
    lines.append("  };")
    lines.append("  events: {")
    lines.extend(_indent([generate_interface_event_description(ev) for ev in events], 2))
    lines.append("  };")
    lines.append("}")
    lines.append("")

    # Contract instance type
    lines.extend([
        f"export interface {name} extends Contract {{",
        f"  interface: {name}Interface;",
        f"  connect(signerOrProvider: Signer | Provider | string): {name};",
        f"  attach(addressOrName: string): {name};",
        f"  deployed(): Promise<{name}>;",
        f"  on(event: EventFilter | string, listener: Listener): {name};",
        f"  once(event: EventFilter | string, listener: Listener): {name};",
        f"  addListener(eventName: EventFilter | string, listener: Listener): {name};",
        f"  removeAllListeners(eventName: EventFilter | string): {name};",
        f"  removeListener(eventName: any, listener: Listener): {name};",
        "",
    ])
    lines.extend(_indent([generate_function(fn) for fn in functions], 1))
    lines.append("")
    lines.extend(_indent([generate_event(ev) for ev in events], 1))
    lines.append("")
    lines.append("  estimate: {")
    lines.extend(_indent([generate_estimate_function(fn) for fn in functions], 2))
    lines.append("  };")
    lines.append("}")
    lines.append("")

    # Static deployment helpers
    lines.extend([
        f"export class {name} {{",
        f"  public static at(signer: Signer, addressOrName: string): {name} {{",
        f"    return this.getFactory(signer).attach(addressOrName) as {name};",
        "  }",
        "",
        f"  public static deploy(signer: Signer{ctor_params}): Promise<{name}> {{",
        f"    return this.getFactory(signer).deploy({ctor_names}) as Promise<{name}>;",
        "  }",
        "",
        f"  public static getDeployTransaction(signer: Signer{ctor_params}): UnsignedTransaction {{",
        f"    return this.getFactory(signer).getDeployTransaction({ctor_names});",
        "  }",
        "",
        f"  public static async awaitDeployment(signer: Signer{ctor_params}, "
        f"overrides?: DeploymentOverrides): Promise<{name}> {{",
        f"    const tx = {name}.getDeployTransaction(signer{ctor_call_names});",
        f"    return awaitContractDeployment(signer, {name}.ABI, tx, overrides);",
        "  }",
        "",
        "  private static getFactory(signer: Signer): ContractFactory {",
        "    return new ContractFactory(this.ABI, this.Bytecode, signer);",
        "  }",
        "",
        f"  public static ABI = {_quote(contract.abi_string)};",
        f"  public static Bytecode = {_quote(contract.bytecode)};",
        "}",
        "",
    ])

    return GeneratedUnit(name=f"{name}.ts", body="\n".join(lines))
