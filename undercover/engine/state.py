"""Immutable game state snapshots."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from .phases import GamePhase, Winner
from .roles import Role


def _no_votes() -> Mapping[int, int]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Player:
    """A seat at the table."""

    id: int
    name: str
    role: Role
    word: Optional[str]  # None for Mr. White
    alive: bool = True

    def eliminated(self) -> "Player":
        """Copy of this player flagged as out of the game."""
        return replace(self, alive=False)


@dataclass(frozen=True)
class GameState:
    """Everything about one game at one moment.

    Transitions never modify a state; they return a new one.
    """

    phase: GamePhase
    players: tuple[Player, ...]
    civilian_word: str
    undercover_word: str
    num_undercover: int
    num_mr_white: int
    current_player_index: int = 0  # Cursor for distribute / describe
    votes: Mapping[int, int] = field(default_factory=_no_votes)  # voter id -> target id
    eliminated_player_id: Optional[int] = None
    winner: Optional[Winner] = None
    round: int = 1

    @property
    def num_civilians(self) -> int:
        return len(self.players) - self.num_undercover - self.num_mr_white

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def with_votes(self, votes: Mapping[int, int]) -> "GameState":
        """Copy with a new, read-only vote mapping."""
        return replace(self, votes=MappingProxyType(dict(votes)))
