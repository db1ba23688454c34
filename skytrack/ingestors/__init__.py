"""Data ingestors for skytrack."""

from .opensky import OpenSkyIngestor

__all__ = ["OpenSkyIngestor"]
