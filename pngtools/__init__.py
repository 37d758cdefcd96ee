"""Read, check, find and vertically concatenate simple three-chunk PNG files."""

__version__ = "0.1.0"