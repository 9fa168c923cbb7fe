"""Position component.

Immutable integer grid coordinates. Equality, ordering and hashing are purely
structural on ``(x, y)`` so positions can be used as blocker-set members no
matter how they were constructed.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mars_rover.directions import Direction


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column, growing eastward.
        y: Row, growing northward.
    """

    x: int
    y: int

    def move(self, direction: "Direction") -> "Position":
        """Return the neighbouring cell one step along ``direction``."""
        return Position(self.x + direction.dx, self.y + direction.dy)

    def is_within_bounds(self, lower: "Position", upper: "Position") -> bool:
        """True if inside the closed rectangle ``lower``..``upper``."""
        return lower.x <= self.x <= upper.x and lower.y <= self.y <= upper.y

    def __str__(self) -> str:
        return f"{self.x} {self.y}"
