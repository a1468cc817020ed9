from backend.models.grid import EMPTY, Grid
from backend.models.shift import Shift

__all__ = ["EMPTY", "Grid", "Shift"]
