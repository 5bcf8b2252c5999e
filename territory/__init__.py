"""Territorial Dispute: plant cannons and wheels to clear an enemy block field."""

__version__ = "1.0.0"
__all__ = ["__version__"]