"""
Main generation pipeline
"""

import logging
from typing import Callable, List, Optional

from .errors import InvalidArtifactError
from .models import Contract, GeneratedUnit, Options
from ..cache.manager import ArtifactCache, JSONCache
from ..generators.ethers import generate_ethers
from ..generators.index import generate_index
from ..parser import AbiParser
from ..utils.files import is_deployable, load_artifact_file, resolve_artifact_paths, write_ts_file

logger = logging.getLogger(__name__)

Generator = Callable[[Contract], GeneratedUnit]
Writer = Callable[[str, GeneratedUnit], object]


class GenerationSummary:
    """What happened to each artifact during one run"""

    def __init__(self, out_dir: str):
        self.out_dir = out_dir
        self.attempted: List[str] = []
        self.generated: List[str] = []
        self.unchanged: List[str] = []
        self.excluded: List[str] = []

    @property
    def total(self) -> int:
        return len(self.attempted)

    def print_summary(self):
        """Print formatted summary"""
        print("\n" + "=" * 80)
        print(f"BINDINGS SUMMARY: {self.out_dir}")
        print("=" * 80)

        if not self.attempted:
            print("⚠️  No deployable artifacts found")
            return

        print(f"\nContracts indexed: {self.total}")
        print(f"✅ Generated: {len(self.generated)}")
        print(f"⏭️  Unchanged: {len(self.unchanged)}")
        if self.excluded:
            print(f"Skipped (not deployable): {len(self.excluded)}")

        for name in self.generated:
            print(f"   + {name}")

        print("\n" + "=" * 80)


def generate(opts: Options,
             generator: Generator = generate_ethers,
             cache: Optional[ArtifactCache] = None,
             writer: Writer = write_ts_file) -> GenerationSummary:
    """
    Generate bindings for every deployable artifact matching opts.pattern.

    Args:
        opts: Artifact pattern (or directory) and output directory
        generator: Turns a Contract into a generated file
        cache: Change detector; defaults to a JSONCache in opts.out_dir
        writer: Persists generated files, called as writer(out_dir, unit)

    Returns:
        GenerationSummary of the run

    Raises:
        InvalidArtifactError: If an artifact file cannot be parsed
        MalformedTypeError: If an ABI type cannot be resolved
        UnrecognizedEntryKindError: If an ABI entry has an unknown type
    """
    if cache is None:
        cache = JSONCache(opts.out_dir)

    parser = AbiParser()
    summary = GenerationSummary(opts.out_dir)

    paths = resolve_artifact_paths(opts.pattern)
    logger.info("Found %d artifact files for %s", len(paths), opts.pattern)

    for path in paths:
        record = load_artifact_file(path)
        if not is_deployable(record):
            logger.debug("Skipping %s: not deployable", path)
            summary.excluded.append(record.contract_name or path)
            continue
        if not record.contract_name:
            raise InvalidArtifactError(path, "missing contractName")

        artifact = record.to_artifact()
        if artifact.name in summary.attempted:
            logger.warning("Duplicate contract name %r in %s, indexing it once", artifact.name, path)
        else:
            summary.attempted.append(artifact.name)

        if not cache.has_changed(artifact):
            logger.debug("%s unchanged, skipping", artifact.name)
            summary.unchanged.append(artifact.name)
            continue

        contract = parser.parse_artifact(artifact)
        writer(opts.out_dir, generator(contract))
        cache.update(artifact)
        summary.generated.append(artifact.name)

    writer(opts.out_dir, generate_index(summary.attempted))
    return summary
