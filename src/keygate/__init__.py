"""HTTP facade for creating and deleting New Relic keys through NerdGraph."""

__version__ = "0.1.0"
