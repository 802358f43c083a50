"""Path enumeration and valuation for layered roguelike dungeon maps."""

__version__ = "0.1.0"
