"""
Artifact Cache - remembers which artifacts already have up to date bindings.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ValidationError

from ..core.config import CACHE_FILE_NAME
from ..core.models import Artifact
from .hasher import compute_artifact_hash

logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    hash: str


class CacheFile(BaseModel):
    """On-disk shape: {"contracts": {"<name>": {"hash": "<hex>"}}}"""
    contracts: Dict[str, CacheEntry] = {}


class ArtifactCache(ABC):
    """Decides whether an artifact's binding must be regenerated"""

    @abstractmethod
    def has_changed(self, artifact: Artifact) -> bool:
        ...

    @abstractmethod
    def update(self, artifact: Artifact) -> None:
        ...


class JSONCache(ArtifactCache):
    """
    Content-hash cache stored as one JSON file in the output directory.

    The file is read once, when the cache is created, and rewritten in full
    after every update.
    """

    def __init__(self, out_dir: str):
        """
        Initialize the cache for an output directory.

        Args:
            out_dir: Directory that holds the generated bindings
        """
        self.out_dir = Path(out_dir)
        self.cache_path = self.out_dir / CACHE_FILE_NAME
        self.model = self._load()
        self.stats = {"hits": 0, "misses": 0, "updates": 0}

    def _load(self) -> CacheFile:
        """Load the cache file; anything unreadable counts as an empty cache."""
        if not self.cache_path.exists():
            return CacheFile()
        try:
            with open(self.cache_path, "r", encoding="utf-8") as f:
                return CacheFile.model_validate(json.load(f))
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", self.cache_path, e)
            return CacheFile()

    def _save(self) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        with open(self.cache_path, "w", encoding="utf-8") as f:
            json.dump(self.model.model_dump(), f, indent=2)

    def has_changed(self, artifact: Artifact) -> bool:
        """
        Check whether an artifact differs from the last recorded version.

        Args:
            artifact: Artifact to check

        Returns:
            True if there is no record for the artifact name or its hash differs
        """
        entry = self.model.contracts.get(artifact.name)
        if entry is None or entry.hash != compute_artifact_hash(artifact):
            self.stats["misses"] += 1
            return True
        self.stats["hits"] += 1
        return False

    def update(self, artifact: Artifact) -> None:
        """Record the artifact's current hash and persist the whole cache."""
        self.model.contracts[artifact.name] = CacheEntry(hash=compute_artifact_hash(artifact))
        self.stats["updates"] += 1
        self._save()

    def invalidate(self, name: str) -> bool:
        """
        Forget one artifact so its binding is regenerated on the next run.

        Returns:
            True if a record was found and removed
        """
        if name not in self.model.contracts:
            return False
        del self.model.contracts[name]
        self._save()
        return True

    def clear(self) -> None:
        """Forget every artifact."""
        self.model = CacheFile()
        self._save()

    def cached_names(self) -> List[str]:
        return sorted(self.model.contracts)

    def get_stats(self) -> Dict[str, int]:
        stats = dict(self.stats)
        stats["total_entries"] = len(self.model.contracts)
        return stats
