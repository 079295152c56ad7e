"""Definitions and transformations for multi-dimensional array data layouts."""

__version__ = "0.2.1"