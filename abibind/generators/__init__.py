"""
TypeScript source generators
"""

from .ethers import generate_ethers
from .index import generate_index

__all__ = ["generate_ethers", "generate_index"]
