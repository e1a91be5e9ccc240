"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgpoly.engine.config import PipelineConfig


SQUARE_D = "M 0 0 L 10 0 L 10 10 L 0 10 Z"

# Two squares drawn as a compound path, the second one relative to the first
COMPOUND_D = "M 0 0 L 10 0 L 10 10 L 0 10 z m 20 0 l 10 0 l 0 10 l -10 0 z"

# Rounded badge: lines and quarter arcs
BADGE_D = "M 2 0 L 8 0 A 2 2 0 0 1 10 2 L 10 8 A 2 2 0 0 1 8 10 L 2 10 A 2 2 0 0 1 0 8 L 0 2 A 2 2 0 0 1 2 0 Z"

DRAWING_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <defs>
    <path id="template" d="M 0 0 L 1 1"/>
  </defs>
  <g transform="translate(5,5)">
    <path id="square" style="fill:none;stroke:#000" d="M 0 0 L 10 0 L 10 10 L 0 10 Z"/>
    <path id="broken" d="L 1 1 L 2 2"/>
    <g>
      <path id="moved" transform="translate(50,0)" d="M 0 0 L 10 0 L 10 10 L 0 10 Z"/>
    </g>
  </g>
  <path id="stroke" d="M 0 50 C 10 60 20 60 30 50"/>
</svg>'''

# Four edges of one rectangle spread over four separate paths
SPLIT_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 20">
  <path id="top" d="M 0 0 L 40 0"/>
  <path id="right" d="M 40 20 L 40 0"/>
  <path id="bottom" d="M 40 20 L 0 20"/>
  <path id="left" d="M 0 0 L 0 20"/>
</svg>'''


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig()


@pytest.fixture
def drawing_svg() -> str:
    return DRAWING_SVG


@pytest.fixture
def split_rect_svg() -> str:
    return SPLIT_RECT_SVG
