"""
I/O Writers

Writes layouts as JSON or TSV files.
"""

from __future__ import annotations
from typing import Sequence
from pathlib import Path
import json
import logging

import pandas as pd

from ..layout.types import LayoutItem
from ..types import PathLike
from .readers import REQUIRED_COLUMNS, OPTIONAL_COLUMNS

logger = logging.getLogger(__name__)


def layout_to_frame(layout: Sequence[LayoutItem]) -> pd.DataFrame:
    """
    Layout as a table, one row per item

    Unset optional fields are left empty. Integer columns use pandas'
    nullable Int64 so empty bounds do not turn into floats.
    """
    frame = pd.DataFrame([item.to_dict() for item in layout],
                         columns=REQUIRED_COLUMNS + OPTIONAL_COLUMNS)
    for col in ['x', 'y', 'w', 'h', 'minW', 'maxW', 'minH', 'maxH']:
        frame[col] = pd.to_numeric(frame[col]).astype('Int64')
    frame['static'] = frame['static'].eq(True)
    return frame


class LayoutWriter:
    """Writes layouts in JSON or TSV form"""

    @staticmethod
    def write_json(layout: Sequence[LayoutItem], output_file: PathLike) -> None:
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump([item.to_dict() for item in layout], f, indent=2)
            f.write('\n')

    @staticmethod
    def write_tsv(layout: Sequence[LayoutItem], output_file: PathLike) -> None:
        layout_to_frame(layout).to_csv(output_file, sep='\t', index=False)

    @classmethod
    def write(cls, layout: Sequence[LayoutItem], output_file: PathLike) -> None:
        """
        Write a layout, choosing the format from the file extension

        Args:
            layout: Items to write
            output_file: Path to a .json or .tsv file

        Raises:
            ValueError: Unsupported extension
        """
        path = Path(output_file)
        suffix = path.suffix.lower()
        if suffix not in ('.json', '.tsv', '.txt'):
            raise ValueError(f"Unsupported layout format: {suffix}. Use .json or .tsv")

        path.parent.mkdir(parents=True, exist_ok=True)
        if suffix == '.json':
            cls.write_json(layout, path)
        else:
            cls.write_tsv(layout, path)
        logger.info(f"Wrote {len(layout)} items to {path}")


def write_layout(layout: Sequence[LayoutItem], output_file: PathLike) -> None:
    """Convenience function to write a layout file"""
    LayoutWriter.write(layout, output_file)
