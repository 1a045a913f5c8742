"""
Shared fixtures: small artifacts modelled on truffle build output
"""

import json

import pytest


TOKEN_ABI = [
    {
        "type": "constructor",
        "inputs": [
            {"name": "name", "type": "string"},
            {"name": "symbol", "type": "string"},
        ],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "totalSupply",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "decimals",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "who", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "value", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "getPosition",
        "inputs": [{"name": "id", "type": "uint256"}],
        "outputs": [
            {"name": "total", "type": "uint256"},
            {"name": "ok", "type": "bool"},
        ],
        "stateMutability": "view",
    },
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
    },
]

TOKEN_BYTECODE = "0x608060405234801561001057600080fd5b50"

LEGACY_ABI = [
    {
        "type": "function",
        "name": "owner",
        "constant": True,
        "payable": False,
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "type": "function",
        "name": "deposit",
        "constant": False,
        "payable": True,
        "inputs": [],
        "outputs": [],
    },
    {
        "type": "fallback",
        "payable": True,
    },
]


@pytest.fixture
def token_abi():
    return json.loads(json.dumps(TOKEN_ABI))


@pytest.fixture
def legacy_abi():
    return json.loads(json.dumps(LEGACY_ABI))


@pytest.fixture
def write_artifact(tmp_path):
    """Write an artifact JSON file under tmp_path/artifacts and return its path"""
    artifacts_dir = tmp_path / "artifacts"

    def _write(contract_name, abi, bytecode=TOKEN_BYTECODE, file_name=None):
        artifacts_dir.mkdir(parents=True, exist_ok=True)
        path = artifacts_dir / (file_name or f"{contract_name}.json")
        record = {"contractName": contract_name, "abi": abi, "bytecode": bytecode}
        path.write_text(json.dumps(record))
        return path

    return _write
