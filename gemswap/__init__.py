"""
Gemswap - Tile-Matching Puzzle Rule Engine

A deterministic rule engine for swap-to-match puzzles. The engine provides:
- A bounds-checked grid of colored tokens
- Swap legality checks
- Run detection (three or more in a line)
- Compound shape detection for overlapping runs
- Match resolution into empty cells and bomb markers
"""

__version__ = "0.1.0"
