from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional

# 9 and 0 both spell E: 1234567890 -> BINASTOREE
DIGIT_LETTERS: Mapping[str, str] = MappingProxyType({
    "1": "B",
    "2": "I",
    "3": "N",
    "4": "A",
    "5": "S",
    "6": "T",
    "7": "O",
    "8": "R",
    "9": "E",
    "0": "E",
})

LEGEND_ORDER = "1234567890"

def map_line(line: Optional[str]) -> str:
    if not line:
        return ""
    out = []
    for ch in line:
        letter = DIGIT_LETTERS.get(ch)
        if letter is not None:
            out.append(letter)
    return "".join(out)

def describe_mapping() -> str:
    """Legend in keypad order, e.g. ``1=B, 2=I, ..., 0=E``."""
    return ", ".join(f"{d}={DIGIT_LETTERS[d]}" for d in LEGEND_ORDER)
