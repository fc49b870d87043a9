"""Domain models for tax lot tracking."""

from .lot import Lot
from .selection_policy import SelectionPolicy

__all__ = ["Lot", "SelectionPolicy"]
