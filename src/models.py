"""
Data models for the word search generator.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from random_source import RandomSource


EMPTY = ""
LETTERS = string.ascii_uppercase

Vector = Tuple[int, int]


class GenerationStatus(Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    CONFIGURATION_ERROR = "configuration_error"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class DirectionOptions:
    """Which placement axes are enabled."""
    horizontal: bool = True
    vertical: bool = True
    diagonal: bool = False
    reverse: bool = False

    def any_axis(self) -> bool:
        return self.horizontal or self.vertical or self.diagonal


@dataclass(frozen=True)
class PlacedWordInfo:
    """Where a word ended up in the grid. Never modified once committed."""
    word: str
    start_row: int
    start_col: int
    d_row: int
    d_col: int
    length: int

    @property
    def end_row(self) -> int:
        return self.start_row + (self.length - 1) * self.d_row

    @property
    def end_col(self) -> int:
        return self.start_col + (self.length - 1) * self.d_col

    @property
    def vector(self) -> Vector:
        return (self.d_row, self.d_col)

    def cells(self) -> List[Tuple[int, int]]:
        """Calculate all cell positions covered by this word."""
        return [
            (self.start_row + i * self.d_row, self.start_col + i * self.d_col)
            for i in range(self.length)
        ]


@dataclass
class PlacementCandidate:
    """A legal position/direction for one word, with its desirability."""
    row: int
    col: int
    d_row: int
    d_col: int
    score: float = 0.0
    overlap: int = 0
    crowding: int = 0


@dataclass
class Grid:
    """Square letter grid. Each cell is EMPTY or one uppercase letter."""
    size: int
    cells: List[List[str]] = field(default_factory=list)

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if not self.cells:
            self.cells = [[EMPTY] * self.size for _ in range(self.size)]

    @classmethod
    def create_empty(cls, size: int) -> 'Grid':
        """Create a size x size grid with every cell empty."""
        return cls(size=size)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Optional[str]:
        """Read a cell; None when out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def set(self, row: int, col: int, value: str) -> bool:
        """Write a cell. Out-of-bounds writes are ignored."""
        if not self.in_bounds(row, col):
            return False
        self.cells[row][col] = value
        return True

    def fill_remaining(self, rng: RandomSource):
        """Give every empty cell a random letter A-Z drawn from rng."""
        for row in self.cells:
            for col, value in enumerate(row):
                if value == EMPTY:
                    row[col] = LETTERS[rng.randint(0, len(LETTERS) - 1)]

    def count_filled(self) -> int:
        """Count non-empty cells."""
        count = 0
        for row in self.cells:
            for value in row:
                if value != EMPTY:
                    count += 1
        return count

    def density(self) -> float:
        """Fraction of cells already holding a letter."""
        return self.count_filled() / (self.size * self.size)

    def to_rows(self, empty_char: str = ".") -> List[str]:
        """Rows as strings, with empty cells shown as empty_char."""
        return [
            "".join(value or empty_char for value in row)
            for row in self.cells
        ]


@dataclass
class GenerationResult:
    """Outcome of a whole-puzzle generation run."""
    status: GenerationStatus
    size: int
    display_grid: Optional[Grid] = None
    solution_grid: Optional[Grid] = None
    placed_words: List[PlacedWordInfo] = field(default_factory=list)
    failed_words: List[str] = field(default_factory=list)
    attempts: int = 0
    reason: str = ""

    @property
    def success(self) -> bool:
        return self.status in (GenerationStatus.SUCCESS, GenerationStatus.PARTIAL)

    @property
    def placed_count(self) -> int:
        return len(self.placed_words)

    def placed_word_strings(self) -> List[str]:
        return [info.word for info in self.placed_words]

    def occupied_cells(self) -> Dict[Tuple[int, int], List[PlacedWordInfo]]:
        """Map each word-covered cell to the placed words running through it."""
        occupied: Dict[Tuple[int, int], List[PlacedWordInfo]] = {}
        for info in self.placed_words:
            for pos in info.cells():
                occupied.setdefault(pos, []).append(info)
        return occupied


@dataclass(frozen=True)
class CapsuleGeometry:
    """Rounded-rectangle outline spanning a placed word, in pixels."""
    start_row: int
    start_col: int
    end_row: int
    end_col: int
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    center_x: float
    center_y: float
    length: float
    width: float
    angle: float

    @property
    def radius(self) -> float:
        return self.width / 2
