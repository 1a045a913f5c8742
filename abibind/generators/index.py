"""
Aggregate index generation: re-exports every binding plus the shared helpers
"""

from typing import Iterable, List

from ..core.config import INDEX_FILE_NAME
from ..core.models import GeneratedUnit

SHARED_HELPERS = """\
export interface TransactionOverrides {
  nonce?: BigNumberish | Promise<BigNumberish>;
  gasLimit?: BigNumberish | Promise<BigNumberish>;
  gasPrice?: BigNumberish | Promise<BigNumberish>;
  value?: BigNumberish | Promise<BigNumberish>;
  chainId?: number | Promise<number>;
}

export interface TypedEventDescription<
  T extends Pick<EventDescription, "encodeTopics">
> extends EventDescription {
  encodeTopics: T["encodeTopics"];
}

export interface TypedFunctionDescription<
  T extends Pick<FunctionDescription, "encode">
> extends FunctionDescription {
  encode: T["encode"];
}

export class DeploymentOverrides {
  nonce?: number;
  gasLimit?: BigNumberish;
  gasPrice?: BigNumberish;
  value?: BigNumberish;
  chainId?: number;
}

export function applyOverrides(tx: UnsignedTransaction, overrides: DeploymentOverrides): UnsignedTransaction {
  return {
    data: tx.data,
    to: tx.to,
    nonce: overrides.nonce ? overrides.nonce : tx.nonce,
    chainId: overrides.chainId ? overrides.chainId : tx.chainId,
    gasLimit: overrides.gasLimit ? overrides.gasLimit : tx.gasLimit,
    gasPrice: overrides.gasPrice ? overrides.gasPrice : tx.gasPrice,
    value: overrides.value ? overrides.value : tx.value,
  };
}

export async function awaitContractDeployment<T extends Contract>(
  signer: Signer,
  abi: string,
  tx: UnsignedTransaction,
  overrides?: DeploymentOverrides
): Promise<T> {
  if (overrides) {
    tx = applyOverrides(tx, overrides);
  }
  const sent = await signer.sendTransaction(tx);
  const receipt = await sent.wait();
  const code = (await signer.provider?.getCode(receipt.contractAddress || "")) || "";
  if (code.length <= 2) {
    throw new Error("Contract not deployed correctly. Is this an abstract contract?");
  }
  return new Contract(receipt.contractAddress || "", abi, signer) as T;
}
"""


def generate_index(contract_names: Iterable[str]) -> GeneratedUnit:
    """
    Generate ``index.ts`` exporting every named contract binding.

    Args:
        contract_names: Contracts to re-export, in output order

    Returns:
        GeneratedUnit for the index file
    """
    lines: List[str] = [
        'import { BigNumberish, EventDescription, FunctionDescription, UnsignedTransaction } from "ethers/utils";',
        'import { Signer, Contract } from "ethers";',
        "",
    ]
    lines.extend(f'export {{ {name} }} from "./{name}";' for name in contract_names)
    lines.append("")
    lines.append(SHARED_HELPERS)

    return GeneratedUnit(name=INDEX_FILE_NAME, body="\n".join(lines))
