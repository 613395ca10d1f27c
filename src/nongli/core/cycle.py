from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type, TypeVar

from .errors import InvalidName

C = TypeVar("C", bound="CyclicLabel")


@dataclass(frozen=True)
class CyclicLabel:
    """
    A label drawn from a fixed cyclic name table.

    Subclasses set ``NAMES``; the index is reduced modulo its length, so
    ``next(n)`` never leaves the table.
    """
    NAMES: ClassVar[Tuple[str, ...]] = ()

    index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", self.index % len(self.NAMES))

    @classmethod
    def from_index(cls: Type[C], index: int) -> C:
        return cls(index)

    @classmethod
    def from_name(cls: Type[C], name: str) -> C:
        try:
            return cls(cls.NAMES.index(name))
        except ValueError:
            raise InvalidName(f"illegal name for {cls.__name__}: {name!r}") from None

    @classmethod
    def size(cls) -> int:
        return len(cls.NAMES)

    @property
    def name(self) -> str:
        return self.NAMES[self.index]

    def next(self: C, n: int) -> C:
        return type(self)(self.index + n)

    def __str__(self) -> str:
        return self.name
