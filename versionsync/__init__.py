"""Codec dependency version synchronizer."""

__version__ = "1.0.0"
