# lattice_lab/map/__init__.py

from .axis import Axis
from .discretizer import Discretizer
from .grid_store import GridStore

__all__ = ["Axis", "Discretizer", "GridStore"]
