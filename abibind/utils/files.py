"""
File I/O utilities: artifact discovery, artifact loading and binding output
"""

import glob
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.config import ARTIFACT_GLOB, EMPTY_BYTECODE
from ..core.errors import InvalidArtifactError
from ..core.models import Artifact, GeneratedUnit

logger = logging.getLogger(__name__)


class ArtifactFile(BaseModel):
    """The fields of a compiler artifact file the generator needs"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    contract_name: Optional[str] = Field(default=None, alias="contractName")
    abi: Optional[List[Dict[str, Any]]] = None
    bytecode: Optional[str] = None

    def to_artifact(self) -> Artifact:
        return Artifact(name=self.contract_name or "", abi=self.abi or [], bytecode=self.bytecode or "")


def resolve_artifact_paths(pattern: str) -> List[str]:
    """
    Expand a glob pattern (or a directory) to artifact file paths.

    Args:
        pattern: Glob pattern, ``**`` allowed; a directory means every JSON file under it

    Returns:
        Sorted list of matching file paths
    """
    if os.path.isdir(pattern):
        pattern = os.path.join(pattern, ARTIFACT_GLOB)
    return sorted(path for path in glob.glob(pattern, recursive=True) if os.path.isfile(path))


def load_artifact_file(path: str) -> ArtifactFile:
    """
    Read and validate one artifact file.

    JSON that is not shaped like an artifact (a bare ABI list, a bytecode
    object) loads as an empty record, which is not deployable.

    Raises:
        InvalidArtifactError: If the file cannot be read or is not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise InvalidArtifactError(path, str(e)) from e

    try:
        return ArtifactFile.model_validate(data)
    except ValidationError as e:
        logger.debug("%s is not an artifact: %s", path, e)
        return ArtifactFile()


def is_deployable(record: ArtifactFile) -> bool:
    """Interfaces have an empty ABI, abstract contracts have no bytecode"""
    return bool(record.abi) and bool(record.bytecode) and record.bytecode != EMPTY_BYTECODE


def write_ts_file(out_dir: str, unit: GeneratedUnit) -> Path:
    """
    Write a generated unit into the output directory, replacing any old copy.

    Args:
        out_dir: Output directory (created if missing)
        unit: Generated file name and body

    Returns:
        Path of the written file
    """
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    final_path = out_path / unit.name
    if final_path.exists():
        final_path.unlink()

    with open(final_path, "w", encoding="utf-8") as f:
        f.write(unit.body)

    logger.info("Wrote %s", final_path)
    return final_path
