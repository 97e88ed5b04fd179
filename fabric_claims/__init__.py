"""Fabric claim overlap analysis."""

__version__ = "0.1.0"
