"""Player level table and lookup."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class LevelInfo:
    level: int
    name: str


@dataclass
class User:
    name: str
    class_: int
    level: int


LEVEL_INFOS = (
    LevelInfo(1, "青铜"),
    LevelInfo(2, "白银"),
    LevelInfo(3, "黄金"),
)


def get_level_info_list() -> List[LevelInfo]:
    return list(LEVEL_INFOS)


def get_level_info(level: int) -> LevelInfo:
    """Return the info for ``level``; raises LookupError if there is none."""
    for info in LEVEL_INFOS:
        if info.level == level:
            return info
    raise LookupError("not Found Level Info")