"""
Direction vector resolution.

Turns the four direction switches into the unit step vectors the
placement search scans.
"""

from typing import Dict, List

from models import DirectionOptions, Vector


HORIZONTAL: Vector = (0, 1)
HORIZONTAL_REVERSED: Vector = (0, -1)
VERTICAL: Vector = (1, 0)
VERTICAL_REVERSED: Vector = (-1, 0)
DIAGONAL_DOWN_RIGHT: Vector = (1, 1)
DIAGONAL_DOWN_LEFT: Vector = (1, -1)
DIAGONAL_UP_RIGHT: Vector = (-1, 1)
DIAGONAL_UP_LEFT: Vector = (-1, -1)

DIRECTION_NAMES: Dict[Vector, str] = {
    HORIZONTAL: "right",
    HORIZONTAL_REVERSED: "left",
    VERTICAL: "down",
    VERTICAL_REVERSED: "up",
    DIAGONAL_DOWN_RIGHT: "down-right",
    DIAGONAL_DOWN_LEFT: "down-left",
    DIAGONAL_UP_RIGHT: "up-right",
    DIAGONAL_UP_LEFT: "up-left",
}


def resolve_direction_vectors(options: DirectionOptions) -> List[Vector]:
    """
    Get direction vectors for the enabled axes.

    Args:
        options: Direction switches

    Returns:
        Vectors in a fixed order; empty when no axis is enabled
        (reverse on its own enables nothing)
    """
    vectors: List[Vector] = []

    if options.horizontal:
        vectors.append(HORIZONTAL)
        if options.reverse:
            vectors.append(HORIZONTAL_REVERSED)

    if options.vertical:
        vectors.append(VERTICAL)
        if options.reverse:
            vectors.append(VERTICAL_REVERSED)

    if options.diagonal:
        vectors.append(DIAGONAL_DOWN_RIGHT)
        vectors.append(DIAGONAL_DOWN_LEFT)
        if options.reverse:
            vectors.append(DIAGONAL_UP_RIGHT)
            vectors.append(DIAGONAL_UP_LEFT)

    return vectors


def direction_name(d_row: int, d_col: int) -> str:
    """Human-readable name of a unit step, e.g. 'down-left'."""
    try:
        return DIRECTION_NAMES[(d_row, d_col)]
    except KeyError:
        raise ValueError(f"Not a unit direction vector: ({d_row}, {d_col})")
