"""Summary models for the command-line report."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PathSummary(BaseModel):
    id: str = ""
    subpaths: int = 0
    points: int = 0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    transformed: bool = False


class ChainSummary(BaseModel):
    points: int = 0
    closed: bool = False
    # Shoelace area: positive = CCW, negative = CW
    signed_area: float = 0.0


class DrawingSummary(BaseModel):
    source: str = ""
    samples: int = 10
    tolerance: float = 1e-5
    paths: list[PathSummary] = Field(default_factory=list)
    failures: list[str] = Field(default_factory=list)
    chains: list[ChainSummary] = Field(default_factory=list)
    closed_area: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def closed_count(self) -> int:
        return sum(1 for c in self.chains if c.closed)

    @property
    def open_count(self) -> int:
        return sum(1 for c in self.chains if not c.closed)
