"""
I/O Readers

Reads layouts from JSON or TSV files.
"""

from __future__ import annotations
from typing import List
from pathlib import Path
import json
import logging

import pandas as pd

from ..layout.types import LayoutItem
from ..types import PathLike

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ['i', 'x', 'y', 'w', 'h']
OPTIONAL_COLUMNS = ['minW', 'maxW', 'minH', 'maxH', 'static', 'isDraggable', 'isResizable']


def frame_to_layout(frame: pd.DataFrame) -> List[LayoutItem]:
    """
    Convert a layout table into items

    Args:
        frame: One row per item; needs columns i, x, y, w, h (an 'id'
            column is accepted in place of 'i')

    Returns:
        List of LayoutItem in row order

    Raises:
        ValueError: Required columns are missing
    """
    if 'i' not in frame.columns and 'id' in frame.columns:
        frame = frame.rename(columns={'id': 'i'})
    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        raise ValueError(f"Layout table is missing columns: {missing}")

    frame = frame.astype({'i': str})
    # Empty cells arrive as NaN; LayoutItem.from_dict treats NaN as unset
    return [LayoutItem.from_dict(record) for record in frame.to_dict('records')]


class LayoutReader:
    """Reads layouts in JSON (list of item objects) or TSV form"""

    @staticmethod
    def read_json(filepath: PathLike) -> List[LayoutItem]:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get('layout', [])
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of layout items in {filepath}")
        return [LayoutItem.from_dict(record) for record in data]

    @staticmethod
    def read_tsv(filepath: PathLike) -> List[LayoutItem]:
        frame: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#', dtype={'i': str, 'id': str})
        return frame_to_layout(frame)

    @classmethod
    def read(cls, filepath: PathLike) -> List[LayoutItem]:
        """
        Read a layout, choosing the format from the file extension

        Args:
            filepath: Path to a .json or .tsv file

        Returns:
            List of LayoutItem

        Raises:
            FileNotFoundError: File does not exist
            ValueError: Unsupported extension or malformed content
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Layout file not found: {path}")

        suffix = path.suffix.lower()
        if suffix == '.json':
            layout = cls.read_json(path)
        elif suffix in ('.tsv', '.txt'):
            layout = cls.read_tsv(path)
        else:
            raise ValueError(f"Unsupported layout format: {suffix}. Use .json or .tsv")

        logger.info(f"Loaded {len(layout)} items from {path}")
        return layout


def read_layout(filepath: PathLike) -> List[LayoutItem]:
    """
    Convenience function to read a layout file

    Args:
        filepath: Path to a .json or .tsv file

    Returns:
        List of LayoutItem
    """
    return LayoutReader.read(filepath)
