"""Enemy blocks, planes and clouds, plus static scenery image paths."""

from . import config
from .geometry import Rect

MAP_IMAGE = config.MAP_PATH
CARD_IMAGE = config.CARD_PATH
SHOP_SUN_IMAGE = config.SHOP_SUN_PATH
SHOP_CARD_IMAGE = config.SHOP_CARD_PATH


class Block:
    """An enemy territory block; idle until deployed, alive until hit."""

    image = config.BLOCK_PATH
    size = config.BLOCK_SIZE

    def __init__(self) -> None:
        self.width, self.height = self.size
        self.x = 0
        self.y = 0
        self.idle = True
        self.alive = True
        self.rect = Rect(self.x + 2, self.y + 1, self.width - 4, self.height - 2)

    @property
    def standing(self) -> bool:
        """True if the block is on the map and still alive."""
        return not self.idle and self.alive

    def deploy(self, x: int, y: int) -> None:
        """Put the block on the map at (x, y)."""
        self.idle = False
        self.x = x
        self.y = y
        self.rect.move_to(x, y)


class DarkBlock(Block):
    """A tougher-looking dark red block."""

    image = config.DBLOCK_PATH
    size = config.DBLOCK_SIZE


class EnemyPlane:
    """Enemy plane starting centred at the top of the map."""

    image = config.ENEMY_PLANE_PATH
    size = config.ENEMY_PLANE_SIZE

    def __init__(self) -> None:
        self.width, self.height = self.size
        self.x = int((config.GAME_WIDTH - self.width) * 0.5)
        self.y = 4
        self.rect = Rect(self.x + 2, self.y + 1, self.width - 4, self.height - 2)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.rect.move_to(x + 2, y + 1)


class Cloud:
    """Enemy cloud starting in the middle of the map."""

    image = config.CLOUD_PATH
    size = config.CLOUD_SIZE

    def __init__(self) -> None:
        self.width, self.height = self.size
        self.x = int((config.GAME_WIDTH - self.width) * 0.5)
        self.y = int((config.GAME_HEIGHT - self.height) * 0.5)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y