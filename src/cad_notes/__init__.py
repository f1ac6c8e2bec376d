"""CAD material and finish notes generator."""

__version__ = "0.1.0"
