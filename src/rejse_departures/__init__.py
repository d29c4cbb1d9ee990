"""Live departure board for Rejseplanen stops."""

__version__ = "0.1.0"
