"""Engine-free game rules for a top-down survival shooter."""

__version__ = "0.1.0"