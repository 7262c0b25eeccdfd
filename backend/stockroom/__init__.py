"""Stockroom - daily revaluation of inventory items by category"""

__version__ = "1.0.0"
