from __future__ import annotations

from typing import Optional


class MoveError(ValueError):
    """Base class for moves rejected by the engine. The board is left untouched."""

    def __init__(self, message: str, source: int, target: int) -> None:
        super().__init__(message)
        self.source = source
        self.target = target


class EmptySource(MoveError):
    def __init__(self, source: int, target: int) -> None:
        super().__init__('No book at the source position', source, target)


class ColorMismatch(MoveError):
    def __init__(self, source: int, target: int, color: int, target_color: Optional[int]) -> None:
        super().__init__('Target position has a different color', source, target)
        self.color = color
        self.target_color = target_color


class InsufficientSpace(MoveError):
    def __init__(self, source: int, target: int, batch_size: int, free: int) -> None:
        super().__init__('Target position does not have enough space', source, target)
        self.batch_size = batch_size
        self.free = free
