"""Battle state: blocks to conquer, planted defenders, sun economy and outcome."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from . import config
from .bullet import Bullet
from .geometry import Rect
from .plants import Cannon1, Cannon3, Plant, Wheel
from .sprites import Block, DarkBlock


class Outcome(Enum):
    """State of the game after a tick."""

    LOST = 1
    WON = 2
    CONTINUE = 3


class PlantKind(Enum):
    """The defenders that can be bought from the shop."""

    CANNON1 = "cannon1"
    CANNON3 = "cannon3"
    WHEEL = "wheel"

    @property
    def plant_type(self) -> type[Plant]:
        return _PLANT_TYPES[self]

    @property
    def cost(self) -> int:
        return self.plant_type.cost

    @property
    def cooldown(self) -> int:
        return self.plant_type.cooldown


_PLANT_TYPES: dict[PlantKind, type[Plant]] = {
    PlantKind.CANNON1: Cannon1,
    PlantKind.CANNON3: Cannon3,
    PlantKind.WHEEL: Wheel,
}


@dataclass(eq=False)
class Sun:
    """A collectable sun lying on the map."""

    x: int
    y: int
    width: int = field(default=config.SUN_SIZE[0])
    height: int = field(default=config.SUN_SIZE[1])

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


def can_place(x: int, y: int) -> bool:
    """True if a defender may be planted at (x, y)."""
    return 0 < y < config.GAME_HEIGHT and 50 < x < config.GAME_WIDTH - 50


class Game:
    """The battle: blocks, defenders, sun and the tick that drives them."""

    def __init__(self) -> None:
        self.record = 0
        self.sun = config.SUN_SUM0
        self.suns: list[Sun] = []
        self.blocks = [Block() for _ in range(config.BLOCK_NUM)]
        self.dark_blocks = [DarkBlock() for _ in range(config.DBLOCK_NUM)]
        self.cannons1: list[Cannon1] = []
        self.cannons3: list[Cannon3] = []
        self.wheels: list[Wheel] = []
        self.selected: dict[PlantKind, Plant | None] = {kind: None for kind in PlantKind}
        self._card_cooldown: dict[PlantKind, int] = {kind: 0 for kind in PlantKind}

    def _planted_list(self, kind: PlantKind) -> list:
        return {
            PlantKind.CANNON1: self.cannons1,
            PlantKind.CANNON3: self.cannons3,
            PlantKind.WHEEL: self.wheels,
        }[kind]

    def tick(self) -> Outcome:
        """Run one frame of the game and report the outcome."""
        self.update_positions()
        self.deploy_blocks()
        self.detect_collisions()
        for kind, remaining in self._card_cooldown.items():
            self._card_cooldown[kind] = max(0, remaining - config.GAME_RATE)
        self.record += 1
        return self.outcome()

    def update_positions(self) -> None:
        """Cool down, fire and move every planted defender and its bullets."""
        for cannon in self.cannons1:
            cannon.update_cooling()
            cannon.shoot()
            for bullet in cannon.bullets:
                bullet.update_position()
        for cannon in self.cannons3:
            cannon.update_cooling()
            cannon.shoot()
            for magazine in cannon.magazines:
                for bullet in magazine:
                    bullet.update_position()
        for wheel in self.wheels:
            wheel.update_cooling()
            wheel.update_position()

    def deploy_blocks(self) -> None:
        """Put every idle, living block onto its grid cell."""
        for index, block in enumerate(self.blocks):
            if block.idle and block.alive:
                row, column = divmod(index, config.BLOCK_COLUMNS)
                block.deploy(
                    2 + column * config.BLOCK_SPACING,
                    3 + row * config.BLOCK_SPACING,
                )

    def _bullet_passes(self) -> list[list[Bullet]]:
        return [
            [b for cannon in self.cannons1 for b in cannon.bullets],
            [b for cannon in self.cannons3 for b in cannon.left_bullets],
            [b for cannon in self.cannons3 for b in cannon.forward_bullets],
            [b for cannon in self.cannons3 for b in cannon.right_bullets],
        ]

    def detect_collisions(self) -> None:
        """Kill blocks hit by bullets or wheels; bullets that hit become idle."""
        for bullets in self._bullet_passes():
            for block in self.blocks:
                if not block.alive:
                    continue
                for bullet in bullets:
                    if not bullet.free and block.rect.intersects(bullet.rect):
                        block.alive = False
                        bullet.free = True
        for block in self.blocks:
            if not block.alive:
                continue
            if any(block.rect.intersects(wheel.rect) for wheel in self.wheels):
                block.alive = False

    def outcome(self) -> Outcome:
        """Lost on time-out, won when few enough blocks stand, else continue."""
        if config.GAME_TIME <= self.record:
            return Outcome.LOST
        standing = sum(b.standing for b in self.blocks)
        standing += sum(b.standing for b in self.dark_blocks)
        if standing <= config.GAME_WIN:
            return Outcome.WON
        return Outcome.CONTINUE

    def spawn_sun(self, rng: random.Random) -> Sun | None:
        """Drop a sun at a random spot unless the screen already holds the maximum."""
        if len(self.suns) >= config.MAX_BUTTONS:
            return None
        x = rng.randrange(config.GAME_WIDTH - config.BUTTON_SIZE)
        y = rng.randrange(config.GAME_HEIGHT - config.BUTTON_SIZE)
        sun = Sun(x, y)
        self.suns.append(sun)
        return sun

    def collect_sun(self, sun: Sun) -> int:
        """Pick up a sun on the map and return the new sun total."""
        self.suns.remove(sun)
        self.sun += config.SUN_VALUE
        return self.sun

    def card_available(self, kind: PlantKind) -> bool:
        """True unless the card is still cooling down after a placement."""
        return self._card_cooldown[kind] == 0

    def select_card(self, kind: PlantKind) -> Plant | None:
        """Buy a defender to place, if affordable and none of that kind is held."""
        if not self.card_available(kind):
            return None
        if self.sun < kind.cost or self.selected[kind] is not None:
            return None
        plant = kind.plant_type()
        self.selected[kind] = plant
        self.sun -= kind.cost
        return plant

    def place_selected(self, x: int, y: int) -> list[Plant]:
        """Plant every held defender at (x, y) if the spot is allowed."""
        placed: list[Plant] = []
        if not can_place(x, y):
            return placed
        for kind in PlantKind:
            plant = self.selected[kind]
            if plant is None:
                continue
            plant.set_position(x, y)
            plant.start_cooling()
            self._planted_list(kind).append(plant)
            self._card_cooldown[kind] = kind.cooldown
            self.selected[kind] = None
            placed.append(plant)
        return placed