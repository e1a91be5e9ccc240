"""Drawing pipeline: path loading and polygon reconstruction transforms."""

from svgpoly.engine.registry import transform, Layer, get_registry
from svgpoly.engine.context import DrawingContext
from svgpoly.engine.config import PipelineConfig
from svgpoly.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "DrawingContext",
    "PipelineConfig",
    "Pipeline",
    "create_pipeline",
]
