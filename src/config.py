# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for word search generator.

Handles loading configuration from YAML files and command-line arguments,
with CLI values taking precedence, and validation.
"""

import argparse
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

import yaml

from models import DirectionOptions
from word_placer import ScoringWeights


# Valid configuration values
MIN_SIZE = 5
MAX_SIZE = 30
VALID_OUTPUT_FORMATS = ["svg_puzzle", "svg_solution", "yaml_result"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class DirectionConfig:
    """Which directions words may run in."""
    horizontal: bool = True
    vertical: bool = True
    diagonal: bool = True
    reverse: bool = False

    def to_options(self) -> DirectionOptions:
        return DirectionOptions(
            horizontal=self.horizontal,
            vertical=self.vertical,
            diagonal=self.diagonal,
            reverse=self.reverse,
        )


@dataclass
class GenerationConfig:
    """Configuration for puzzle generation."""
    max_attempts: int = 10
    attempts_per_word: int = 1
    seed: Optional[int] = None
    sparse_density: float = 0.3
    dense_density: float = 0.6
    overlap_weight_sparse: float = 2.0
    overlap_weight_dense: float = 10.0
    spacing_weight_sparse: float = 1.0
    spacing_weight_dense: float = 0.25

    def to_scoring_weights(self) -> ScoringWeights:
        return ScoringWeights(
            sparse_density=self.sparse_density,
            dense_density=self.dense_density,
            overlap_weight_sparse=self.overlap_weight_sparse,
            overlap_weight_dense=self.overlap_weight_dense,
            spacing_weight_sparse=self.spacing_weight_sparse,
            spacing_weight_dense=self.spacing_weight_dense,
        )


@dataclass
class DisplayConfig:
    """Presentation preferences for rendered output."""
    cell_size: int = 40
    show_grid_lines: bool = True
    show_grid_border: bool = True
    outline_words: bool = True
    color_words: bool = False
    hide_other_letters: Optional[bool] = None

    def effective_hide_other_letters(self) -> bool:
        """Unset means: hide filler letters whenever grid lines are shown."""
        if self.hide_other_letters is None:
            return self.show_grid_lines
        return self.hide_other_letters


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: [
        "svg_puzzle", "svg_solution", "yaml_result"
    ])
    log_level: str = "INFO"
    log_file_prefix: str = "word_search_generator"
    enable_console_logging: bool = True


@dataclass
class PuzzleConfig:
    """Complete configuration for puzzle generation."""
    # Puzzle settings
    title: str = "Word Search Puzzle"
    size: int = 15
    words: List[str] = field(default_factory=list)
    words_file: Optional[str] = None

    # Sub-configurations
    directions: DirectionConfig = field(default_factory=DirectionConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.directions, dict):
            self.directions = DirectionConfig(**self.directions)
        if isinstance(self.generation, dict):
            self.generation = GenerationConfig(**self.generation)
        if isinstance(self.display, dict):
            self.display = DisplayConfig(**self.display)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    @classmethod
    def from_yaml(cls, path: str) -> 'PuzzleConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            PuzzleConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'PuzzleConfig':
        """Create PuzzleConfig from dictionary."""
        # Handle nested 'puzzle' key
        puzzle_data = data.get('puzzle', {}) or {}

        config = cls(
            title=puzzle_data.get('title', cls.title),
            size=puzzle_data.get('size', cls.size),
            words=[str(w) for w in puzzle_data.get('words', []) or []],
            words_file=puzzle_data.get('words_file'),
        )

        # Load sub-configurations; unknown keys are a configuration error
        sections = {
            'directions': DirectionConfig,
            'generation': GenerationConfig,
            'display': DisplayConfig,
            'output': OutputConfig,
        }
        for name, section_cls in sections.items():
            if name not in data:
                continue
            section_data = data[name] or {}
            if not isinstance(section_data, dict):
                raise ConfigValidationError(f"Section '{name}' must be a mapping")
            merged = asdict(getattr(config, name))
            unknown = set(section_data) - set(merged)
            if unknown:
                raise ConfigValidationError(
                    f"Unknown keys in '{name}': {', '.join(sorted(unknown))}"
                )
            merged.update(section_data)
            setattr(config, name, section_cls(**merged))

        return config

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        base: Optional['PuzzleConfig'] = None
    ) -> 'PuzzleConfig':
        """
        Apply command-line arguments on top of a base configuration.

        Args:
            args: Parsed command-line arguments
            base: Configuration loaded from YAML (defaults if None)

        Returns:
            PuzzleConfig instance
        """
        config = base or cls()

        def given(name: str) -> bool:
            return getattr(args, name, None) is not None

        # Map CLI arguments to config
        if given('title'):
            config.title = args.title
        if given('size'):
            config.size = args.size
        if given('words'):
            config.words = list(args.words)
        if given('words_file'):
            config.words_file = args.words_file

        for flag in ('horizontal', 'vertical', 'diagonal', 'reverse'):
            if given(flag):
                setattr(config.directions, flag, getattr(args, flag))

        if given('seed'):
            config.generation.seed = args.seed
        if given('max_attempts'):
            config.generation.max_attempts = args.max_attempts
        if given('attempts_per_word'):
            config.generation.attempts_per_word = args.attempts_per_word

        if given('cell_size'):
            config.display.cell_size = args.cell_size
        if given('grid_lines'):
            config.display.show_grid_lines = args.grid_lines
        if given('outline_words'):
            config.display.outline_words = args.outline_words
        if given('color_words'):
            config.display.color_words = args.color_words
        if given('hide_other_letters'):
            config.display.hide_other_letters = args.hide_other_letters

        if given('output'):
            config.output.directory = args.output
        if given('format'):
            config.output.formats = [f.strip() for f in args.format.split(',') if f.strip()]
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"

        return config

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.title, str) or not self.title.strip():
            errors.append("Title must be a non-empty string")

        if not _is_int(self.size) or not MIN_SIZE <= self.size <= MAX_SIZE:
            errors.append(
                f"Invalid size {self.size}. Must be between {MIN_SIZE} and {MAX_SIZE}"
            )

        if not self.words and not self.words_file:
            errors.append("Provide words or a words_file")

        if not self.directions.to_options().any_axis():
            errors.append(
                "Select at least one direction (horizontal, vertical or diagonal)"
            )

        generation = self.generation
        for name in ('max_attempts', 'attempts_per_word'):
            value = getattr(generation, name)
            if not _is_int(value) or value < 1:
                errors.append(f"{name} must be an integer of at least 1, got {value!r}")
        if generation.seed is not None and not _is_int(generation.seed):
            errors.append(f"seed must be an integer, got {generation.seed!r}")

        weight_fields = (
            'sparse_density', 'dense_density',
            'overlap_weight_sparse', 'overlap_weight_dense',
            'spacing_weight_sparse', 'spacing_weight_dense',
        )
        bad_weights = [
            name for name in weight_fields if not _is_number(getattr(generation, name))
        ]
        for name in bad_weights:
            errors.append(f"{name} must be a number, got {getattr(generation, name)!r}")
        if ('sparse_density' not in bad_weights and 'dense_density' not in bad_weights
                and not (0.0 <= generation.sparse_density
                         <= generation.dense_density <= 1.0)):
            errors.append(
                "Density thresholds must satisfy "
                "0 <= sparse_density <= dense_density <= 1"
            )

        if not _is_int(self.display.cell_size) or self.display.cell_size <= 0:
            errors.append(
                f"cell_size must be a positive integer, got {self.display.cell_size!r}"
            )

        if not isinstance(self.output.formats, list):
            errors.append(f"formats must be a list, got {self.output.formats!r}")
        else:
            for fmt in self.output.formats:
                if fmt not in VALID_OUTPUT_FORMATS:
                    errors.append(
                        f"Invalid output format '{fmt}'. "
                        f"Must be one of: {VALID_OUTPUT_FORMATS}"
                    )

        if (not isinstance(self.output.log_level, str)
                or self.output.log_level.upper() not in VALID_LOG_LEVELS):
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'title': self.title,
                'size': self.size,
                'words': list(self.words),
                'words_file': self.words_file,
            },
            'directions': asdict(self.directions),
            'generation': asdict(self.generation),
            'display': asdict(self.display),
            'output': asdict(self.output),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Words on the command line
  word-search-generator --words CAT DOG BIRD --size 10

  # Word file and YAML configuration
  word-search-generator --config puzzle.yaml --words-file animals.txt

  # Reproducible puzzle with reversed words allowed
  word-search-generator --config puzzle.yaml --seed 42 --reverse
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--title", "-t",
        metavar="TEXT",
        help="Puzzle title"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        help=f"Grid size between {MIN_SIZE} and {MAX_SIZE} (default: 15)"
    )
    parser.add_argument(
        "--words", "-w",
        nargs="+",
        metavar="WORD",
        help="Words to hide"
    )
    parser.add_argument(
        "--words-file",
        metavar="PATH",
        help="File with one word per line (# comments and blank lines ignored)"
    )

    # Directions
    for flag, help_text in (
        ("horizontal", "left-to-right words"),
        ("vertical", "top-to-bottom words"),
        ("diagonal", "diagonal words"),
        ("reverse", "reversed orientations of the enabled axes"),
    ):
        parser.add_argument(
            f"--{flag}",
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Allow {help_text}"
        )

    # Generation settings
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible puzzles"
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        metavar="INT",
        help="Whole-puzzle attempts before keeping the best (default: 10)"
    )
    parser.add_argument(
        "--attempts-per-word",
        type=int,
        metavar="INT",
        help="Placement attempts per word (default: 1)"
    )

    # Display settings
    parser.add_argument(
        "--cell-size",
        type=int,
        metavar="PX",
        help="Cell size in pixels for SVG output (default: 40)"
    )
    parser.add_argument(
        "--grid-lines",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw lines between cells"
    )
    parser.add_argument(
        "--outline-words",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Outline words on the solution"
    )
    parser.add_argument(
        "--color-words",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Highlight word cells on the solution"
    )
    parser.add_argument(
        "--hide-other-letters",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show only word letters on the solution"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory"
    )
    parser.add_argument(
        "--format",
        metavar="FORMATS",
        help="Comma-separated output formats"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> PuzzleConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved PuzzleConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = PuzzleConfig.from_yaml(args.config)

    # CLI values win over YAML
    config = PuzzleConfig.from_args(args, base=yaml_config)

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
