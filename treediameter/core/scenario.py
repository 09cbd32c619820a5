"""A validated tree together with its diameter and provenance."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from treediameter.core.exceptions import LoadError, NotATreeError
from treediameter.core.graph.base import TreeModel
from treediameter.core.graph.diameter import find_diameter
from treediameter.core.graph.generator import (
    generate_random_tree,
    random_vertex_count,
    sample_tree,
)
from treediameter.core.graph.loader import TreeFileFormat, load_tree
from treediameter.core.graph.models import DiameterResult
from treediameter.core.graph.validation import check_tree
from treediameter.core.models import TreeSource

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT_RANGE = (1, 10)
DEFAULT_VERTEX_RANGE = (6, 11)

_FORMAT_SOURCES = {
    TreeFileFormat.EDGE_LIST: TreeSource.EDGE_LIST,
    TreeFileFormat.ADJACENCY_MATRIX: TreeSource.ADJACENCY_MATRIX,
}


@dataclass(frozen=True)
class Scenario:
    """One tree and its computed diameter.

    Switching to another tree means building a new Scenario; instances
    are never edited in place.
    """

    source: TreeSource
    model: TreeModel
    diameter: DiameterResult
    fallback_reason: str | None = None

    @classmethod
    def from_model(cls, model: TreeModel, source: TreeSource) -> Scenario:
        """Validate model and compute its diameter. Raises NotATreeError."""
        check = check_tree(model)
        if not check:
            raise NotATreeError(f"Graph is not a tree: {check.reason}")
        return cls(source=source, model=model, diameter=find_diameter(model))

    @classmethod
    def from_sample(cls) -> Scenario:
        return cls.from_model(sample_tree(), TreeSource.SAMPLE)

    @classmethod
    def from_random(
        cls,
        vertex_count: int | None = None,
        weight_range: tuple[int, int] | None = None,
        seed: int | None = None,
        vertex_range: tuple[int, int] | None = None,
    ) -> Scenario:
        """Generate a random tree.

        The size is drawn from vertex_range (6..11 by default) when
        vertex_count is not given; weights default to 1..10.
        """
        rng = random.Random(seed)
        if vertex_count is None:
            vertex_count = random_vertex_count(rng, *(vertex_range or DEFAULT_VERTEX_RANGE))
        logger.info("Generating random tree with %d vertices", vertex_count)
        model = generate_random_tree(vertex_count, weight_range or DEFAULT_WEIGHT_RANGE, rng)
        return cls.from_model(model, TreeSource.RANDOM)

    @classmethod
    def from_file(
        cls,
        path: Path,
        fmt: TreeFileFormat = TreeFileFormat.EDGE_LIST,
        strict: bool = False,
    ) -> Scenario:
        """Load a tree file.

        Unreadable files and non-trees are replaced by the sample tree,
        with fallback_reason recording why. With strict=True the
        LoadError or NotATreeError propagates instead.
        """
        try:
            return cls.from_model(load_tree(path, fmt), _FORMAT_SOURCES[fmt])
        except (LoadError, NotATreeError) as e:
            if strict:
                raise
            logger.warning("Falling back to the sample tree: %s", e)
            return replace(cls.from_sample(), fallback_reason=str(e))

    @property
    def used_fallback(self) -> bool:
        return self.fallback_reason is not None

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view of the scenario."""
        return {
            "source": self.source.value,
            "fallback_reason": self.fallback_reason,
            "vertices": list(self.model.vertices),
            "edges": [edge.to_dict() for edge in self.model.edges],
            "diameter": self.diameter.to_dict(),
        }
