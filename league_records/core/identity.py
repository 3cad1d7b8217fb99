"""Canonical player identity across season uploads.

A player's history line is keyed by ``(position, name)`` and serialised as
``"POS:Name"``. The league export carries no stable player id, so two players
sharing a position and display name collapse onto the same history line.
Names are kept verbatim; no trimming or case folding happens here because that
would silently change which uploads match an existing history.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import CareerPlayer

KEY_SEPARATOR = ":"


@dataclass(frozen=True, order=True)
class PlayerKey:
    """Opaque composite key identifying one player's season history."""

    position: str
    name: str

    def __str__(self) -> str:
        return f"{self.position}{KEY_SEPARATOR}{self.name}"

    @classmethod
    def parse(cls, text: str) -> "PlayerKey":
        """Invert ``str(key)``; only the first separator splits position from name."""

        position, _, name = text.partition(KEY_SEPARATOR)
        return cls(position=position, name=name)

    def matches(self, positions: Iterable[str]) -> bool:
        return self.position in set(positions)


def resolve(position: str, raw_name: str) -> PlayerKey:
    """Map a raw stat row's position and display name to its history key."""

    return PlayerKey(position=position, name=raw_name)


def key_for(player: CareerPlayer) -> PlayerKey:
    return resolve(player.position, player.name)


__all__ = ["KEY_SEPARATOR", "PlayerKey", "key_for", "resolve"]
