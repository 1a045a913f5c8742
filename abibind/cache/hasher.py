"""
Content hashing for artifact cache lookup.
"""

import hashlib
import json

from ..core.models import Artifact


def canonical_abi(artifact: Artifact) -> str:
    """ABI serialized as canonical JSON (sorted keys, no whitespace)"""
    return json.dumps(artifact.abi, sort_keys=True, separators=(",", ":"))


def compute_artifact_hash(artifact: Artifact) -> str:
    """
    Compute the content hash of an artifact.

    The hash covers the ABI and the bytecode, the only inputs of a generated
    binding. The artifact name is the cache key and is not part of the hash.

    Args:
        artifact: Artifact with abi and bytecode

    Returns:
        64-character SHA-256 hex digest
    """
    combined = canonical_abi(artifact) + artifact.bytecode
    return hashlib.sha256(combined.encode("utf-8")).hexdigest()
