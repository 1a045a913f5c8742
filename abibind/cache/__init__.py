"""
Artifact cache

Skips regeneration of bindings whose artifact has not changed since the last
run, keyed by contract name and compared by content hash.
"""

from abibind.cache.hasher import compute_artifact_hash
from abibind.cache.manager import ArtifactCache, JSONCache

__all__ = ['compute_artifact_hash', 'ArtifactCache', 'JSONCache']
