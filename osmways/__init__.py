"""OpenStreetMap way model: ids, node references, updates and geometry."""

__version__ = "0.1.0"
__all__ = ["ids", "way"]