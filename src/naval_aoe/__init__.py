"""Naval board renderer with cone, cross and diamond area-of-effect overlays."""

__version__ = "0.1.0"
