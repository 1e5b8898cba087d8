"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest
from game_fakes import OthelloBoard, TreeState, leaf, node

from othellie.engine.evaluator import Evaluator
from othellie.engine.stats import SearchStatistics

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for the Qt worker tests."""
    qt_core = pytest.importorskip("PyQt6.QtCore")

    app = qt_core.QCoreApplication.instance()
    if app is None:
        app = qt_core.QCoreApplication([])
    yield app


@pytest.fixture()
def stats() -> SearchStatistics:
    return SearchStatistics()


@pytest.fixture()
def evaluator(stats: SearchStatistics) -> Evaluator:
    return Evaluator(stats)


@pytest.fixture()
def initial_board() -> OthelloBoard:
    return OthelloBoard.initial()


@pytest.fixture()
def classic_tree() -> TreeState:
    """Three-ply textbook tree; the root mover should play ``b``.

    Reply values (from the opponent's side) are ``a``: 3, ``b``: 1,
    ``c``: 2, so ``b`` leaves the opponent worst off.  The last leaf under
    ``a`` is pruned.
    """
    root = node(
        0,
        node(
            0,
            node(0, leaf(3), leaf(5)),
            node(0, leaf(-1), leaf(9)),
            move="a",
        ),
        node(
            0,
            node(0, leaf(-2), leaf(-4)),
            node(0, leaf(7), leaf(1)),
            move="b",
        ),
        node(
            0,
            node(0, leaf(1), leaf(8)),
            node(0, leaf(2), leaf(4)),
            move="c",
        ),
    )
    return TreeState(root)
