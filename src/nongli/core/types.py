from __future__ import annotations

from enum import Enum


class Gender(Enum):
    WOMAN = 0
    MAN = 1


class YinYang(Enum):
    YIN = 0
    YANG = 1

    @classmethod
    def from_index(cls, index: int) -> "YinYang":
        return cls.YANG if index % 2 == 0 else cls.YIN
