"""
SVG Renderer for word search puzzles.
Draws the puzzle page (grid + word list) and the solution page
(word outlines, highlights).
"""

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple
from xml.sax.saxutils import escape

from geometry import capsule_geometry, capsule_path_data
from models import GenerationResult, Grid


@dataclass
class SVGConfig:
    """Configuration for SVG rendering."""
    cell_size: int = 40
    border_width: int = 2
    inner_border_width: int = 1

    # Colors
    background_color: str = "#FFFFFF"
    grid_color: str = "#CCCCCC"
    border_color: str = "#000000"
    letter_color: str = "#000000"
    faded_letter_color: str = "#BBBBBB"
    highlight_color: str = "#90EE90"
    capsule_color: str = "#000000"

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    letter_font_size: int = 20
    title_font_size: int = 20
    word_font_size: int = 14

    # Capsule stroke, as a fraction of cell height
    capsule_stroke_ratio: float = 0.15
    capsule_opacity: float = 0.85

    # Layout
    margin: int = 20
    title_height: int = 50
    word_line_height: int = 20
    word_columns: int = 3


class SVGRenderer:
    """Renders word search puzzles as SVG."""

    def __init__(self, config: Optional[SVGConfig] = None):
        self.config = config or SVGConfig()

    def render_puzzle(
        self,
        result: GenerationResult,
        title: str = "Word Search Puzzle",
        words: Optional[List[str]] = None,
        show_grid_lines: bool = True,
        show_border: bool = True
    ) -> str:
        """
        Render the puzzle page: title, filled grid and the word list.

        Args:
            result: Successful generation result
            title: Puzzle title
            words: Words to list under the grid (defaults to placed words)
            show_grid_lines: Draw lines between cells
            show_border: Draw the outer border

        Returns:
            SVG string
        """
        grid = self._require_grid(result.display_grid)
        if words is None:
            words = result.placed_word_strings()
        words = sorted(words)

        cfg = self.config
        grid_px = grid.size * cfg.cell_size
        rows = -(-len(words) // cfg.word_columns) if words else 0
        list_height = rows * cfg.word_line_height + cfg.margin if words else 0
        total_width = grid_px + 2 * cfg.margin
        total_height = cfg.title_height + grid_px + cfg.margin + list_height

        svg_parts = self._header(total_width, total_height, title)
        svg_parts.append(
            f'  <text x="{total_width / 2}" y="{cfg.title_height * 0.6}" '
            f'class="title" text-anchor="middle">{escape(title)}</text>'
        )

        origin_x = cfg.margin
        origin_y = cfg.title_height
        svg_parts.extend(self._grid_cells(grid, origin_x, origin_y, show_grid_lines))
        if show_border:
            svg_parts.append(self._border(origin_x, origin_y, grid_px))

        # Word list in columns
        column_width = grid_px / cfg.word_columns
        list_y = origin_y + grid_px + cfg.margin + cfg.word_font_size
        for i, word in enumerate(words):
            col = i // rows
            row = i % rows
            x = origin_x + col * column_width
            y = list_y + row * cfg.word_line_height
            svg_parts.append(f'  <text x="{x}" y="{y}" class="word">{escape(word)}</text>')

        svg_parts.append('</svg>')
        return '\n'.join(svg_parts)

    def render_solution(
        self,
        result: GenerationResult,
        title: str = "Solution",
        outline_words: bool = True,
        color_words: bool = False,
        hide_other_letters: bool = False,
        show_grid_lines: bool = True,
        show_border: bool = True
    ) -> str:
        """
        Render the solution page.

        Args:
            result: Successful generation result
            title: Page title
            outline_words: Draw a capsule around every placed word
            color_words: Fill word cells with the highlight color
            hide_other_letters: Show only word letters (solution grid)
                instead of the full display grid with filler faded
            show_grid_lines: Draw lines between cells
            show_border: Draw the outer border

        Returns:
            SVG string
        """
        display = self._require_grid(result.display_grid)
        solution = self._require_grid(result.solution_grid)

        cfg = self.config
        grid_px = display.size * cfg.cell_size
        total_width = grid_px + 2 * cfg.margin
        total_height = cfg.title_height + grid_px + cfg.margin

        word_cells: Set[Tuple[int, int]] = set(result.occupied_cells())

        svg_parts = self._header(total_width, total_height, title)
        svg_parts.append(
            f'  <text x="{total_width / 2}" y="{cfg.title_height * 0.6}" '
            f'class="title" text-anchor="middle">{escape(title)}</text>'
        )

        origin_x = cfg.margin
        origin_y = cfg.title_height

        if color_words:
            for row, col in sorted(word_cells):
                svg_parts.append(
                    f'  <rect x="{origin_x + col * cfg.cell_size}" '
                    f'y="{origin_y + row * cfg.cell_size}" '
                    f'width="{cfg.cell_size}" height="{cfg.cell_size}" class="highlight" />'
                )

        source = solution if hide_other_letters else display
        svg_parts.extend(
            self._grid_cells(source, origin_x, origin_y, show_grid_lines, word_cells)
        )

        if outline_words:
            svg_parts.append(
                f'  <g transform="translate({origin_x} {origin_y})" class="capsules">'
            )
            for info in result.placed_words:
                geometry = capsule_geometry(info, cfg.cell_size)
                svg_parts.append(
                    f'    <path d="{capsule_path_data(geometry)}" class="capsule" '
                    f'transform="rotate({geometry.angle:.2f} '
                    f'{geometry.center_x:.2f} {geometry.center_y:.2f})">'
                    f'<title>{escape(info.word)}</title></path>'
                )
            svg_parts.append('  </g>')

        if show_border:
            svg_parts.append(self._border(origin_x, origin_y, grid_px))

        svg_parts.append('</svg>')
        return '\n'.join(svg_parts)

    def _header(self, width: float, height: float, title: str) -> List[str]:
        cfg = self.config
        stroke = cfg.cell_size * cfg.capsule_stroke_ratio
        return [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {width} {height}" '
            f'width="{width}" height="{height}">',
            f'  <title>{escape(title)}</title>',
            '  <style>',
            f'    .cell {{ fill: none; stroke: {cfg.grid_color}; stroke-width: {cfg.inner_border_width}; }}',
            f'    .letter {{ font-family: {cfg.font_family}; font-size: {cfg.letter_font_size}px; '
            f'font-weight: bold; fill: {cfg.letter_color}; text-anchor: middle; dominant-baseline: central; }}',
            f'    .filler {{ fill: {cfg.faded_letter_color}; font-weight: normal; }}',
            f'    .highlight {{ fill: {cfg.highlight_color}; }}',
            f'    .capsule {{ fill: none; stroke: {cfg.capsule_color}; stroke-width: {stroke:.2f}; '
            f'opacity: {cfg.capsule_opacity}; }}',
            f'    .title {{ font-family: {cfg.font_family}; font-size: {cfg.title_font_size}px; '
            f'font-weight: bold; fill: {cfg.letter_color}; }}',
            f'    .word {{ font-family: {cfg.font_family}; font-size: {cfg.word_font_size}px; fill: {cfg.letter_color}; }}',
            '  </style>',
            f'  <rect x="0" y="0" width="{width}" height="{height}" fill="{cfg.background_color}" />',
        ]

    def _grid_cells(
        self,
        grid: Grid,
        origin_x: float,
        origin_y: float,
        show_grid_lines: bool,
        word_cells: Optional[Set[Tuple[int, int]]] = None
    ) -> List[str]:
        """Cell outlines and letters. Letters outside word_cells are faded when given."""
        cfg = self.config
        parts = []
        for row in range(grid.size):
            for col in range(grid.size):
                x = origin_x + col * cfg.cell_size
                y = origin_y + row * cfg.cell_size
                if show_grid_lines:
                    parts.append(
                        f'  <rect x="{x}" y="{y}" '
                        f'width="{cfg.cell_size}" height="{cfg.cell_size}" class="cell" />'
                    )
                letter = grid.get(row, col)
                if not letter:
                    continue
                css = "letter"
                if word_cells is not None and (row, col) not in word_cells:
                    css = "letter filler"
                parts.append(
                    f'  <text x="{x + cfg.cell_size / 2}" y="{y + cfg.cell_size / 2}" '
                    f'class="{css}">{letter}</text>'
                )
        return parts

    def _border(self, origin_x: float, origin_y: float, grid_px: float) -> str:
        cfg = self.config
        return (
            f'  <rect x="{origin_x}" y="{origin_y}" '
            f'width="{grid_px}" height="{grid_px}" '
            f'fill="none" stroke="{cfg.border_color}" stroke-width="{cfg.border_width}" />'
        )

    @staticmethod
    def _require_grid(grid: Optional[Grid]) -> Grid:
        if grid is None:
            raise ValueError("Cannot render a failed generation result")
        return grid

    def save(self, svg_content: str, filepath: str):
        """Save SVG to file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(svg_content)
