"""
treediameter configuration

Settings come from environment variables prefixed with TREEDIAMETER_ and
from an optional ./.env file:

- TREEDIAMETER_RANDOM_MIN_VERTICES / _MAX_VERTICES: random tree size range
- TREEDIAMETER_MIN_WEIGHT / _MAX_WEIGHT: random edge weight range
- TREEDIAMETER_INPUT_DIR: extra directory searched for tree files
- TREEDIAMETER_LOG_LEVEL: root log level for the CLI
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from treediameter.core.graph.loader import TreeFileFormat

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """treediameter configuration settings."""

    random_min_vertices: int = 6
    random_max_vertices: int = 11
    min_weight: int = 1
    max_weight: int = 10

    edge_list_file: str = "tree_edges.txt"
    adjacency_matrix_file: str = "tree_adjacency.txt"
    input_dir: Path = Path("input")

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="TREEDIAMETER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def weight_range(self) -> tuple[int, int]:
        return (self.min_weight, self.max_weight)

    def default_file(self, fmt: TreeFileFormat) -> str:
        """Default file name for a tree format."""
        if fmt is TreeFileFormat.ADJACENCY_MATRIX:
            return self.adjacency_matrix_file
        return self.edge_list_file

    def resolve_input(self, filename: str, base: Path | None = None) -> Path:
        """Look for filename in base (cwd by default), then in input_dir.

        Falls back to the unresolved name so the loader reports the miss.
        """
        base = base or Path.cwd()
        for candidate in (base / filename, base / self.input_dir / filename):
            if candidate.exists():
                return candidate
        logger.warning("File %s not found in %s or %s", filename, base, base / self.input_dir)
        return base / filename


settings = Settings()
