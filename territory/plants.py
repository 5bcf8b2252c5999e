"""Placeable defenders: two cannons and a rolling wheel."""

from collections.abc import Iterator

from . import config
from .bullet import Bullet, Direction
from .geometry import Rect


class Plant:
    """Common position, hit box and cool-down handling for defenders."""

    image = ""
    size: tuple[int, int] = (0, 0)
    cooldown = 0
    # (dx, dy, dw, dh) applied to the hit box before the first placement
    rect_inset: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __init__(self) -> None:
        self.width, self.height = self.size
        self.x = -100
        self.y = -100
        dx, dy, dw, dh = self.rect_inset
        self.rect = Rect(self.x + dx, self.y + dy, self.width - dw, self.height - dh)
        self.cooldown_opacity = 1.0
        self._cooling = False
        self._cooling_time = 0

    @property
    def cooling(self) -> bool:
        """True while the plant is still cooling down after placement."""
        return self._cooling

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.rect.move_to(x, y)

    def start_cooling(self) -> None:
        self._cooling = True
        self._cooling_time = 0

    def update_cooling(self) -> None:
        """Advance the cool-down by one tick, fading the overlay linearly."""
        if not self._cooling:
            return
        self._cooling_time += config.GAME_RATE
        self.cooldown_opacity = max(0.0, 1.0 - self._cooling_time / self.cooldown)
        if self._cooling_time >= self.cooldown:
            self._cooling = False
            self._cooling_time = 0
            self.cooldown_opacity = 0.0


def _first_free(magazine: list[Bullet]) -> Bullet | None:
    return next((bullet for bullet in magazine if bullet.free), None)


class Cannon1(Plant):
    """Cannon that fires straight ahead."""

    image = config.CANNON1_PATH
    size = config.CANNON1_SIZE
    cooldown = config.CANNON1_COOLDOWN
    cost = config.CANNON1_COST
    rect_inset = (2, 1, 4, 2)

    def __init__(self) -> None:
        super().__init__()
        self.recorder = 0
        self.bullets = [Bullet() for _ in range(config.CANNON1_BULLET_NUM)]

    def shoot(self) -> Bullet | None:
        """Count a tick and fire a bullet every BULLET_INTERVAL ticks."""
        if self.cooling:
            return None
        self.recorder += 1
        if self.recorder < config.BULLET_INTERVAL:
            return None
        self.recorder = 0
        bullet = _first_free(self.bullets)
        if bullet is not None:
            bullet.fire(self.x + 45, self.y, Direction.FORWARD)
        return bullet

    def active_bullets(self) -> Iterator[Bullet]:
        return (bullet for bullet in self.bullets if not bullet.free)


class Cannon3(Plant):
    """Cannon that fires left-forward, forward and right-forward at once."""

    image = config.CANNON3_PATH
    size = config.CANNON3_SIZE
    cooldown = config.CANNON3_COOLDOWN
    cost = config.CANNON3_COST
    rect_inset = (2, 1, 4, 2)

    def __init__(self) -> None:
        super().__init__()
        self.recorder = 0
        self.left_bullets = [Bullet() for _ in range(config.CANNON3_BULLET_NUM_1)]
        self.forward_bullets = [Bullet() for _ in range(config.CANNON3_BULLET_NUM_2)]
        self.right_bullets = [Bullet() for _ in range(config.CANNON3_BULLET_NUM_3)]

    @property
    def magazines(self) -> tuple[list[Bullet], list[Bullet], list[Bullet]]:
        return self.left_bullets, self.forward_bullets, self.right_bullets

    def shoot(self) -> list[Bullet]:
        """Count a tick and fire one bullet per direction every BULLET_INTERVAL ticks."""
        self.recorder += 1
        if self.recorder < config.BULLET_INTERVAL:
            return []
        self.recorder = 0
        launches = (
            (self.left_bullets, self.x - 30, Direction.LEFT),
            (self.forward_bullets, self.x + 30, Direction.FORWARD),
            (self.right_bullets, self.x + 90, Direction.RIGHT),
        )
        fired = []
        for magazine, x, direction in launches:
            bullet = _first_free(magazine)
            if bullet is not None:
                bullet.fire(x, self.y - 30, direction)
                fired.append(bullet)
        return fired

    def active_bullets(self) -> Iterator[Bullet]:
        return (
            bullet
            for magazine in self.magazines
            for bullet in magazine
            if not bullet.free
        )


class Wheel(Plant):
    """Wheel that rolls up the map crushing blocks in its way."""

    image = config.WHEEL_PATH
    size = config.WHEEL_SIZE
    cooldown = config.WHEEL_COOLDOWN
    cost = config.WHEEL_COST

    def update_position(self) -> None:
        self.y -= config.GAME_V
        self.rect.move_to(self.x, self.y)