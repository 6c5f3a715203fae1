"""GUI components for competition_field."""

from competition_field.gui.canvas import FieldCanvas
from competition_field.gui.window import FieldWindow

__all__ = ["FieldCanvas", "FieldWindow"]
