"""Tests for polygon reconstruction (segment stitching)."""

import itertools
import logging

import numpy as np
import pytest

from svgpoly.engine.config import PipelineConfig
from svgpoly.engine.context import DrawingContext
from svgpoly.engine.layer1.t1_01_polygon_reconstruction import (
    build_segments,
    paths_to_closed_polylines,
    polygon_reconstruction,
    reconstruct_polygons,
)
from svgpoly.svg.loader import load_path
from tests.conftest import COMPOUND_D, SQUARE_D

TOL = 1e-5

SQUARE_EDGES = [
    ((0.0, 0.0), (1.0, 0.0)),
    ((1.0, 0.0), (1.0, 1.0)),
    ((1.0, 1.0), (0.0, 1.0)),
    ((0.0, 1.0), (0.0, 0.0)),
]


def _as_polylines(edges):
    return [np.array(edge, dtype=float) for edge in edges]


def _orientations(edges):
    for flips in itertools.product([False, True], repeat=len(edges)):
        yield [edge[::-1] if flip else edge for edge, flip in zip(edges, flips)]


def test_square_edges_any_order_and_orientation():
    for order in itertools.permutations(SQUARE_EDGES):
        for edges in _orientations(list(order)):
            closed, open_chains = reconstruct_polygons(_as_polylines(edges), TOL)
            assert len(closed) == 1
            assert not open_chains
            assert closed[0].shape == (5, 2)
            np.testing.assert_array_equal(closed[0][0], closed[0][-1])
            assert {tuple(p) for p in closed[0]} == {(0, 0), (1, 0), (1, 1), (0, 1)}


def test_missing_edge_gives_one_open_chain():
    for missing in range(4):
        kept = SQUARE_EDGES[:missing] + SQUARE_EDGES[missing + 1 :]
        for order in itertools.permutations(kept):
            for edges in _orientations(list(order)):
                closed, open_chains = reconstruct_polygons(_as_polylines(edges), TOL)
                assert not closed
                assert len(open_chains) == 1
                assert open_chains[0].shape == (4, 2)


@pytest.mark.parametrize("eps, merged", [(0.5e-5, True), (2e-5, False)])
def test_tolerance_decides_merge(eps, merged):
    a = np.array([[0.0, 0.0], [1.0, 0.0]])
    b = np.array([[1.0 + eps, 0.0], [1.0, 1.0]])
    closed, open_chains = reconstruct_polygons([a, b], TOL)
    assert not closed
    assert len(open_chains) == (1 if merged else 2)


def test_closed_polyline_round_trips():
    square = np.array([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]], dtype=float)
    closed, open_chains = reconstruct_polygons([square], TOL)
    assert len(closed) == 1
    np.testing.assert_array_equal(closed[0], square)
    assert not open_chains


def test_short_segments_are_dropped(caplog):
    poly = np.array([[0, 0], [5, 0], [5, 1e-7], [5, 5]], dtype=float)
    with caplog.at_level(logging.DEBUG):
        segments = build_segments([poly], TOL)
    assert len(segments) == 2
    np.testing.assert_array_equal(segments[1][0], [5, 0])
    assert "Ignoring short segment" in caplog.text


def test_polyline_of_one_point_has_no_segments():
    assert build_segments([np.array([[1.0, 1.0]]), np.empty((0, 2))], TOL) == []


def test_two_separate_loops():
    closed, open_chains = reconstruct_polygons(
        [
            np.array([[0, 0], [1, 0], [1, 1], [0, 0]], dtype=float),
            np.array([[5, 5], [6, 5], [6, 6], [5, 5]], dtype=float),
        ],
        TOL,
    )
    assert len(closed) == 2
    assert not open_chains


def test_open_chains_are_reported(caplog):
    with caplog.at_level(logging.INFO):
        reconstruct_polygons([np.array([[0, 0], [1, 0]], dtype=float)], TOL)
    assert "not part of a closed path" in caplog.text


def test_paths_to_closed_polylines(config):
    paths = [load_path({"d": COMPOUND_D}, config), load_path({"d": "M 0 20 L 5 20"}, config)]
    closed, open_chains = paths_to_closed_polylines(paths, TOL)
    assert len(closed) == 2
    assert len(open_chains) == 1


def test_transform_populates_context():
    ctx = DrawingContext(config=PipelineConfig(tolerance=TOL))
    ctx.paths = [load_path({"d": SQUARE_D}, ctx.config)]
    polygon_reconstruction(ctx)
    assert len(ctx.closed_polylines) == 1
    assert ctx.polygons[0].area == pytest.approx(100.0)
