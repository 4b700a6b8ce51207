"""SNIRF probe layout parsing, layers, assets, buffer layouts and a camera base for a NIRS viewer."""

__version__ = "1.0.0"