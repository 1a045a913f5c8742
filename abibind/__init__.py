"""
abibind: typed TypeScript bindings for compiled Solidity contracts
"""

from .core.models import Artifact, Contract, GeneratedUnit, Options
from .core.pipeline import GenerationSummary, generate
from .parser import map_contract
from .translators.solidity_types import parse_solidity_type
from .generators.ethers import generate_ethers

__version__ = "0.1.0"
__all__ = [
    "generate",
    "generate_ethers",
    "map_contract",
    "parse_solidity_type",
    "Artifact",
    "Contract",
    "GeneratedUnit",
    "GenerationSummary",
    "Options",
]
