"""Animated jack-in-the-box machines built from cranks, shafts, pulleys and cams, drawn on a recording graphics context."""

__version__ = "0.1.0"