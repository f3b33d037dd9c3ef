"""
Default data files for GridPack
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Example dashboard layout (12 columns, pinned header row)
EXAMPLE_LAYOUT = os.path.join(DATA_DIR, 'example_layout.tsv')
