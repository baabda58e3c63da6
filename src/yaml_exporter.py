# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML exporter for word search puzzles.

Writes a finished GenerationResult (grids, placed words with their
outline geometry, failed words) as structured YAML for downstream tools.
"""

import os
from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, Optional

import yaml

from directions import direction_name
from geometry import capsule_geometry
from models import DirectionOptions, GenerationResult, PlacedWordInfo


FORMAT_VERSION = "1.0"


class YAMLExportError(Exception):
    """Raised when YAML export fails."""
    pass


class YAMLExporter:
    """
    Exports word search results to YAML.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(result, title="Animals")
        exporter.save(result, 'output/animals.yaml', title="Animals")
    """

    def export(
        self,
        result: GenerationResult,
        title: str = "Word Search Puzzle",
        options: Optional[DirectionOptions] = None,
        seed: Optional[int] = None,
        cell_size: float = 40,
    ) -> str:
        """
        Export a result to a YAML string.

        Args:
            result: Generation result (successful or not)
            title: Puzzle title
            options: Direction switches used for generation
            seed: Random seed, if the run was seeded
            cell_size: Cell size used for the capsule geometry

        Returns:
            YAML string representation of the puzzle
        """
        data = self.to_dict(result, title, options, seed, cell_size)

        header = "# Word Search Puzzle\n"
        header += "# Grids use '.' for cells no word covers\n\n"

        try:
            yaml_content = yaml.safe_dump(
                data,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2,
                width=80,
            )
        except yaml.YAMLError as e:
            raise YAMLExportError(f"Could not serialize puzzle: {e}")

        return header + yaml_content

    def to_dict(
        self,
        result: GenerationResult,
        title: str = "Word Search Puzzle",
        options: Optional[DirectionOptions] = None,
        seed: Optional[int] = None,
        cell_size: float = 40,
    ) -> Dict[str, Any]:
        """Build the plain-data structure that gets serialized."""
        data: Dict[str, Any] = {
            'metadata': {
                'title': title,
                'size': result.size,
                'status': result.status.value,
                'attempts': result.attempts,
                'seed': seed,
                'directions': asdict(options) if options else None,
                'format_version': FORMAT_VERSION,
                'created_at': datetime.now().isoformat(timespec='seconds'),
            },
        }
        if result.reason:
            data['metadata']['reason'] = result.reason

        if result.display_grid is not None:
            data['grid'] = result.display_grid.to_rows()
        if result.solution_grid is not None:
            data['solution'] = result.solution_grid.to_rows()

        data['words'] = [
            self._word_entry(info, cell_size) for info in result.placed_words
        ]
        data['failed_words'] = list(result.failed_words)
        return data

    @staticmethod
    def _word_entry(info: PlacedWordInfo, cell_size: float) -> Dict[str, Any]:
        geometry = capsule_geometry(info, cell_size)
        return {
            'word': info.word,
            'start': [info.start_row, info.start_col],
            'end': [info.end_row, info.end_col],
            'vector': [info.d_row, info.d_col],
            'direction': direction_name(info.d_row, info.d_col),
            'capsule': {
                'center': [round(geometry.center_x, 2), round(geometry.center_y, 2)],
                'length': round(geometry.length, 2),
                'width': round(geometry.width, 2),
                'angle': round(geometry.angle, 2),
            },
        }

    def save(
        self,
        result: GenerationResult,
        path: str,
        title: str = "Word Search Puzzle",
        options: Optional[DirectionOptions] = None,
        seed: Optional[int] = None,
        cell_size: float = 40,
    ) -> str:
        """
        Export a result and write it to path.

        Returns:
            The path written
        """
        content = self.export(result, title, options, seed, cell_size)

        directory = os.path.dirname(path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise YAMLExportError(f"Could not write {path}: {e}")

        return path
