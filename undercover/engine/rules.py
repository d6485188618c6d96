"""Game creation, vote counting and win conditions."""

import random
from collections import Counter
from typing import Optional, Sequence

from .errors import InvalidSetupError, UnknownPlayerError
from .phases import GamePhase, Winner
from .roles import Role, is_infiltrator
from .state import GameState, Player
from .words import WORD_PAIRS, WordPair, pick_word_pair

MIN_PLAYERS = 3
MAX_PLAYERS = 12

# Returned by tally_votes when nobody voted
NO_ONE: Optional[int] = None


def max_infiltrators(player_count: int) -> int:
    """Largest infiltrator count that still leaves civilians a strict majority."""
    return max(0, (player_count - 1) // 2)


def default_player_names(names: Sequence[str]) -> list[str]:
    """Trim names and fill blank seats with "Player N"."""
    return [name.strip() or f"Player {i + 1}" for i, name in enumerate(names)]


def validate_setup(names: Sequence[str], num_undercover: int, num_mr_white: int) -> None:
    """Check that the names and faction counts can form a game.

    Raises:
        InvalidSetupError: Describing the first problem found.
    """
    count = len(names)
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise InvalidSetupError(
            f"Need between {MIN_PLAYERS} and {MAX_PLAYERS} players, got {count}"
        )

    seen: set[str] = set()
    for name in names:
        key = name.strip().casefold()
        if not key:
            raise InvalidSetupError("Player names cannot be blank")
        if key in seen:
            raise InvalidSetupError(f"Duplicate player name: {name.strip()}")
        seen.add(key)

    if num_undercover < 0 or num_mr_white < 0:
        raise InvalidSetupError("Faction counts cannot be negative")

    infiltrators = num_undercover + num_mr_white
    if infiltrators < 1:
        raise InvalidSetupError("At least one Undercover or Mr. White is required")

    limit = max_infiltrators(count)
    if infiltrators > limit:
        raise InvalidSetupError(
            f"{infiltrators} infiltrators is too many for {count} players (max {limit})"
        )


def assign_roles(
    player_count: int,
    num_undercover: int,
    num_mr_white: int,
    rng: Optional[random.Random] = None,
) -> list[Role]:
    """Build the role pool and shuffle it.

    Returns:
        One role per seat, in seat order.
    """
    rng = rng or random
    role_pool: list[Role] = []
    role_pool.extend([Role.UNDERCOVER] * num_undercover)
    role_pool.extend([Role.MR_WHITE] * num_mr_white)
    role_pool.extend([Role.CIVILIAN] * (player_count - len(role_pool)))
    rng.shuffle(role_pool)
    return role_pool


def word_for(role: Role, civilian_word: str, undercover_word: str) -> Optional[str]:
    """The secret word a role gets to see."""
    if role == Role.CIVILIAN:
        return civilian_word
    if role == Role.UNDERCOVER:
        return undercover_word
    if role == Role.MR_WHITE:
        return None
    raise ValueError(f"Unknown role: {role}")


def create_game(
    names: Sequence[str],
    num_undercover: int,
    num_mr_white: int,
    rng: Optional[random.Random] = None,
    word_pairs: Sequence[WordPair] = WORD_PAIRS,
) -> GameState:
    """Start a new game.

    Args:
        names: Player names in seat order.
        num_undercover: How many Undercover players.
        num_mr_white: How many Mr. White players.
        rng: Random source, for reproducible games.
        word_pairs: Table to draw the secret words from.

    Returns:
        A state in the distribute phase, cursor on the first seat.

    Raises:
        InvalidSetupError: If the table cannot be set up with these numbers.
    """
    validate_setup(names, num_undercover, num_mr_white)
    rng = rng or random

    civilian_word, undercover_word = pick_word_pair(rng, word_pairs)
    roles = assign_roles(len(names), num_undercover, num_mr_white, rng)

    players = tuple(
        Player(
            id=i,
            name=name.strip(),
            role=role,
            word=word_for(role, civilian_word, undercover_word),
        )
        for i, (name, role) in enumerate(zip(names, roles))
    )

    return GameState(
        phase=GamePhase.DISTRIBUTE,
        players=players,
        civilian_word=civilian_word,
        undercover_word=undercover_word,
        num_undercover=num_undercover,
        num_mr_white=num_mr_white,
    )


def alive_players(state: GameState) -> list[Player]:
    """Get all alive players, in seat order."""
    return [p for p in state.players if p.alive]


def get_player(state: GameState, player_id: int) -> Player:
    """Look up a player by id."""
    for player in state.players:
        if player.id == player_id:
            return player
    raise UnknownPlayerError(f"No player with id {player_id}")


def tally_votes(state: GameState) -> Optional[int]:
    """Find the player the table voted out.

    Targets are considered in the order they first received a vote, and a
    later target only takes the lead with strictly more votes, so a tie goes
    to whoever reached that count first in casting order.

    Returns:
        The eliminated player's id, or NO_ONE if there are no votes.
    """
    counts = Counter(state.votes.values())

    eliminated = NO_ONE
    max_votes = 0
    for target_id, count in counts.items():
        if count > max_votes:
            max_votes = count
            eliminated = target_id
    return eliminated


def check_win_condition(state: GameState) -> Optional[Winner]:
    """Check if the game has ended.

    Returns:
        INFILTRATORS if they match or outnumber the civilians, CIVILIANS if
        every infiltrator is out, None if the game goes on.
    """
    alive = alive_players(state)
    infiltrator_count = sum(1 for p in alive if is_infiltrator(p.role))
    civilian_count = len(alive) - infiltrator_count

    if infiltrator_count >= civilian_count:
        return Winner.INFILTRATORS
    if infiltrator_count == 0:
        return Winner.CIVILIANS
    return None
