"""skytrack: poll OpenSky for aircraft state vectors inside a bounding box."""

__version__ = "0.1.0"
