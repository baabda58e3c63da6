"""
Capsule geometry for outlining placed words.

Pure numeric functions shared by every presentation surface. Nothing here
knows how the capsule is eventually drawn.
"""

import math
from typing import List, Optional

from models import CapsuleGeometry, PlacedWordInfo


# Extension past each end letter and capsule width, as fractions of cell height
EXTENSION_RATIO = 0.4
WIDTH_RATIO = 0.7


def capsule_geometry(
    info: PlacedWordInfo,
    cell_width: float,
    cell_height: Optional[float] = None,
    extension_ratio: float = EXTENSION_RATIO,
    width_ratio: float = WIDTH_RATIO,
) -> CapsuleGeometry:
    """
    Compute the capsule outline for a placed word.

    Args:
        info: Placed word
        cell_width: Cell width in pixels
        cell_height: Cell height in pixels (defaults to cell_width)
        extension_ratio: How far the capsule reaches past each end cell center
        width_ratio: Capsule thickness

    Returns:
        CapsuleGeometry in the grid's pixel coordinate system
    """
    if cell_height is None:
        cell_height = cell_width
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_width}x{cell_height}")

    start_x = info.start_col * cell_width + cell_width / 2
    start_y = info.start_row * cell_height + cell_height / 2
    end_x = info.end_col * cell_width + cell_width / 2
    end_y = info.end_row * cell_height + cell_height / 2

    dx = end_x - start_x
    dy = end_y - start_y
    distance = math.hypot(dx, dy)
    extension = cell_height * extension_ratio

    return CapsuleGeometry(
        start_row=info.start_row,
        start_col=info.start_col,
        end_row=info.end_row,
        end_col=info.end_col,
        start_x=start_x,
        start_y=start_y,
        end_x=end_x,
        end_y=end_y,
        center_x=(start_x + end_x) / 2,
        center_y=(start_y + end_y) / 2,
        length=distance + extension * 2,
        width=cell_height * width_ratio,
        angle=math.degrees(math.atan2(dy, dx)),
    )


def capsule_overlays(
    infos: List[PlacedWordInfo],
    cell_width: float,
    cell_height: Optional[float] = None,
) -> List[CapsuleGeometry]:
    """Geometry for every placed word, in placement order."""
    return [capsule_geometry(info, cell_width, cell_height) for info in infos]


def capsule_path_data(geometry: CapsuleGeometry) -> str:
    """
    SVG path of the unrotated capsule centred on its center point.

    Rotate by geometry.angle about the center to align it with the word.
    """
    cx, cy = geometry.center_x, geometry.center_y
    half = geometry.length / 2
    r = geometry.radius
    return " ".join([
        f"M {_fmt(cx - half + r)} {_fmt(cy - r)}",
        f"L {_fmt(cx + half - r)} {_fmt(cy - r)}",
        f"A {_fmt(r)} {_fmt(r)} 0 0 1 {_fmt(cx + half - r)} {_fmt(cy + r)}",
        f"L {_fmt(cx - half + r)} {_fmt(cy + r)}",
        f"A {_fmt(r)} {_fmt(r)} 0 0 1 {_fmt(cx - half + r)} {_fmt(cy - r)}",
        "Z",
    ])


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")
