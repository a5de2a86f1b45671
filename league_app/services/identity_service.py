import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class NormalizedKey(str):
    """Comparison key for a team or player name.

    Two names refer to the same entity iff their keys are equal. The empty
    key means "no name" and never matches anything, itself included.
    """

    def matches(self, other: "NormalizedKey") -> bool:
        return bool(self) and str.__eq__(self, other)


def normalize(name: Optional[str]) -> NormalizedKey:
    if not name:
        return NormalizedKey("")
    return NormalizedKey(_NON_ALNUM.sub("", name.lower()).strip())


def same_name(a: Optional[str], b: Optional[str]) -> bool:
    return normalize(a).matches(normalize(b))


def synthetic_player_id(name: str) -> int:
    """Stable id for a player first seen in event data.

    31-multiplier string hash over UTF-16 code units, wrapped to a signed
    32-bit integer, then made non-negative.
    """
    h = 0
    data = name.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)
