"""Pipeline configuration — sampling resolution and stitching tolerance."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable settings threaded through tessellation and stitching."""

    # Points sampled per cubic Bézier segment (the endpoint included)
    samples: int = 10

    # Max distance between two points considered the same when stitching
    tolerance: float = 1e-5

    @property
    def sample_count(self) -> int:
        return max(1, self.samples)
