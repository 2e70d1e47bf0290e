"""newnew - scaffold new projects from declarative templates."""

__version__ = "0.3.0"
