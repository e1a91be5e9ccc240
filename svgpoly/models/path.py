"""Path data model — commands, subpaths, and the tessellated path record.

Letter case is resolved once, in the tokenizer. Past that point a command is
an explicit ``(kind, relative)`` pair and its arity comes from ``ARITY``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


class CommandKind(enum.Enum):
    MOVE = "m"
    LINE = "l"
    CUBIC_CURVE = "c"
    ARC = "a"
    CLOSE = "z"
    # Any other letter (h, v, q, s, t, ...): kept as one command and skipped by the tessellator
    UNSUPPORTED = "unsupported"


# Fixed number of numeric arguments per command kind. UNSUPPORTED has none: it is
# passed through the expander as written.
ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE: 2,
    CommandKind.LINE: 2,
    CommandKind.CUBIC_CURVE: 6,
    CommandKind.ARC: 7,
    CommandKind.CLOSE: 0,
}

# Supported command letters (lower case)
COMMAND_LETTERS: dict[str, CommandKind] = {
    "m": CommandKind.MOVE,
    "l": CommandKind.LINE,
    "c": CommandKind.CUBIC_CURVE,
    "a": CommandKind.ARC,
    "z": CommandKind.CLOSE,
}


@dataclass(frozen=True)
class Command:
    """One path command with its numeric arguments."""

    kind: CommandKind
    relative: bool = False
    arguments: tuple[float, ...] = ()
    # Source letter, kept for diagnostics only
    letter: str = ""

    @property
    def arity(self) -> int | None:
        return ARITY.get(self.kind)

    @property
    def is_move(self) -> bool:
        return self.kind is CommandKind.MOVE

    def __str__(self) -> str:
        args = " ".join(f"{a:g}" for a in self.arguments)
        return f"{self.letter} {args}".strip()


# A subpath is the run of commands from one move command up to the next one
Subpath = tuple[Command, ...]

# An ordered Nx2 array of (x, y) points
Polyline = NDArray[np.float64]


def identity_matrix() -> NDArray[np.float64]:
    return np.identity(3, dtype=np.float64)


@dataclass
class SVGPath:
    """One path element: its commands grouped by subpath, and their polylines.

    ``polylines[i]`` is the tessellation of ``subpaths[i]``.
    """

    id: str = ""
    style: str = ""
    transform: NDArray[np.float64] = field(default_factory=identity_matrix)
    subpaths: list[Subpath] = field(default_factory=list)
    polylines: list[Polyline] = field(default_factory=list)

    @property
    def point_count(self) -> int:
        return sum(len(p) for p in self.polylines)

    @property
    def has_transform(self) -> bool:
        return not np.array_equal(self.transform, identity_matrix())
