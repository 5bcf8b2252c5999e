"""Bullets fired by cannons."""

from enum import Enum

from . import config
from .geometry import Rect


class Direction(Enum):
    """Direction a bullet travels in."""

    LEFT = 1
    FORWARD = 2
    RIGHT = 3


class Bullet:
    """A pooled bullet; idle bullets are free to be fired again."""

    image = config.BULLET_PATH

    def __init__(self, size: tuple[int, int] = config.BULLET_SIZE) -> None:
        self.width, self.height = size
        self.x = 0
        self.y = 0
        self.free = True
        self.direction = Direction.FORWARD
        self.rect = Rect(self.x + 2, self.y + 1, self.width - 4, self.height - 2)

    def _sync_rect(self) -> None:
        self.rect.move_to(self.x + 2, self.y + 1)

    def fire(self, x: int, y: int, direction: Direction) -> None:
        """Launch the bullet from (x, y) in the given direction."""
        self.free = False
        self.direction = direction
        self.x = x
        self.y = y
        self._sync_rect()

    def update_position(self) -> None:
        """Advance one tick; bullets leaving the top become idle, sides bounce."""
        if self.free:
            return
        if self.y <= -self.rect.height:
            self.free = True
            return
        if self.direction is Direction.LEFT:
            if self.x < 10:
                self.x += config.GAME_V
                self.direction = Direction.RIGHT
            else:
                self.x -= config.GAME_V
        elif self.direction is Direction.RIGHT:
            if self.x > config.GAME_WIDTH - 40:
                self.x -= config.GAME_V
                self.direction = Direction.LEFT
            else:
                self.x += config.GAME_V
        self.y -= config.GAME_V
        self._sync_rect()