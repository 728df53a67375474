"""Turn-based deck-building game rules: cards, status effects, combat turns, rewards, map nodes and run saves."""

__version__ = "0.1.0"