"""
RU: Абстрактный рисунок штрихкода: упорядоченная последовательность модулей.
EN: Abstract bar pattern, an ordered sequence of black/white modules of height 1.

The pattern is free of any graphics-library type so that renderers can work
on it directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

__all__ = ["BarPattern"]


@dataclass(frozen=True)
class BarPattern:
    """
    Immutable 1D bar pattern. ``cells[i]`` is True for a black module.

    Examples:
        >>> p = BarPattern.from_modules("1011")
        >>> p.width
        4
        >>> p.is_black(1)
        False
    """

    cells: Tuple[bool, ...]

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("Bar pattern must contain at least one module")

    @classmethod
    def from_modules(cls, modules: str) -> "BarPattern":
        """Build from a module string where ``"1"`` is a bar and ``"0"`` a space."""
        invalid = set(modules) - {"0", "1"}
        if invalid:
            raise ValueError(f"Unexpected module symbols: {sorted(invalid)!r}")
        return cls(tuple(ch == "1" for ch in modules))

    @property
    def width(self) -> int:
        """Logical width in modules."""
        return len(self.cells)

    @property
    def height(self) -> int:
        return 1

    def is_black(self, index: int) -> bool:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> bool:
        return self.cells[index]

    def to_modules(self) -> str:
        return "".join("1" if cell else "0" for cell in self.cells)
