"""A game character with health, force, level and coins."""

from __future__ import annotations

DEFAULT_MAX_HP = 100
DEFAULT_FORCE = 5
DEFAULT_LEVEL = 1
DEFAULT_COINS = 0
MAX_LEVEL = 10


class Player:
    """A player whose stats change through encounters.

    A non-positive ``max_hp`` or a negative ``force`` falls back to the
    defaults. Health stays between zero and the maximum, and the level
    never rises above ten.
    """

    def __init__(
        self, name: str, max_hp: int = DEFAULT_MAX_HP, force: int = DEFAULT_FORCE
    ) -> None:
        self._name = name
        self._max_hp = max_hp if max_hp > 0 else DEFAULT_MAX_HP
        self._force = force if force >= 0 else DEFAULT_FORCE
        self._hp = self._max_hp
        self._level = DEFAULT_LEVEL
        self._coins = DEFAULT_COINS

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_hp(self) -> int:
        return self._max_hp

    @property
    def force(self) -> int:
        return self._force

    @property
    def hp(self) -> int:
        return self._hp

    @property
    def level(self) -> int:
        return self._level

    @property
    def coins(self) -> int:
        return self._coins

    def level_up(self) -> None:
        """Raise the level by one, up to the maximum level."""
        if self._level < MAX_LEVEL:
            self._level += 1

    def buff(self, amount: int) -> None:
        """Increase force by a positive ``amount``."""
        if amount > 0:
            self._force += amount

    def heal(self, amount: int) -> None:
        """Restore a positive ``amount`` of health, up to the maximum."""
        if amount > 0:
            self._hp = min(self._max_hp, self._hp + amount)

    def damage(self, amount: int) -> None:
        """Take a positive ``amount`` of damage, down to zero health."""
        if amount > 0:
            self._hp = max(0, self._hp - amount)

    def is_knocked_out(self) -> bool:
        """Return True when no health is left."""
        return self._hp == 0

    def add_coins(self, amount: int) -> None:
        """Add a positive ``amount`` of coins."""
        if amount > 0:
            self._coins += amount

    def pay(self, amount: int) -> bool:
        """Spend ``amount`` coins if possible; return whether it was paid."""
        if amount >= 0 and self._coins >= amount:
            self._coins -= amount
            return True
        return False

    def attack_strength(self) -> int:
        """Return force plus level."""
        return self._force + self._level

    def __str__(self) -> str:
        return (
            f"{self._name}: level {self._level}, force {self._force}, "
            f"HP {self._hp}, coins {self._coins}"
        )

    def __repr__(self) -> str:
        return (
            f"Player(name={self._name!r}, max_hp={self._max_hp}, "
            f"force={self._force}, hp={self._hp}, level={self._level}, "
            f"coins={self._coins})"
        )