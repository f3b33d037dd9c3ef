"""Exceptions raised for caller errors"""


class GridLayoutError(ValueError):
    """Base class for invalid layouts handed to GridPack"""


class DuplicateIdError(GridLayoutError):
    """Raised when a layout or managed id set repeats an id"""

    def __init__(self, duplicates, source: str = "layout"):
        self.duplicates = sorted(duplicates)
        self.source = source
        super().__init__(f"Duplicate ids in {source}: {', '.join(self.duplicates)}")
