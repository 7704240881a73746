# src/dropfour/types.py

from __future__ import annotations
from typing import Hashable, Literal, NewType, Optional, Tuple

Token = Hashable              # color name or any distinguishable value
Cell = Optional[Token]
Move = NewType("Move", int)   # column index 0..width-1
Coord = Tuple[int, int]       # (row, col), row 0 is the top
Role = Literal["human", "computer"]
