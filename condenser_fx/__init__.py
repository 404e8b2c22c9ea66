"""Threshold-gated loop recorder audio effect, in mono and stereo forms."""

__version__ = "0.1.0"
__all__ = ["condenser", "plugin"]