from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Shape of a game: number of colors, shelf capacity and number of shelves."""
    colors: int
    height: int
    quantity: int

    def __post_init__(self) -> None:
        for name in ('colors', 'height', 'quantity'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'{name} must be an integer, got {value!r}')
            if value < 1:
                raise ValueError(f'{name} must be at least 1, got {value}')
        # Every color fills exactly one shelf, so there must be a shelf per color.
        if self.colors > self.quantity:
            raise ValueError(
                f'{self.colors} colors of {self.height} books do not fit on {self.quantity} shelves'
            )

    @classmethod
    def default(cls) -> 'GameConfig':
        return cls(colors=6, height=5, quantity=9)

    @property
    def total_books(self) -> int:
        return self.colors * self.height
