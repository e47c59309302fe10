"""Console ticket office kept in fixed-size binary record files."""

__version__ = "0.1.0"