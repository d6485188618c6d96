"""Game engine - roles, words, phases, rules and transitions."""

from .errors import (
    GameError,
    InvalidGuessError,
    InvalidSetupError,
    InvalidVoteError,
    PhaseError,
    UnknownPlayerError,
)
from .game import Game
from .phases import GamePhase, Winner, winner_name
from .roles import Role, ROLES, role_emoji, role_name, is_infiltrator
from .rules import (
    NO_ONE,
    alive_players,
    check_win_condition,
    create_game,
    default_player_names,
    get_player,
    max_infiltrators,
    tally_votes,
)
from .state import GameState, Player
from .transitions import (
    cast_vote,
    continue_game,
    current_player,
    next_player,
    pending_voters,
    start_vote,
    submit_guess,
)
from .words import WORD_PAIRS, pick_word_pair

__all__ = [
    "Game",
    "GameError",
    "GamePhase",
    "GameState",
    "InvalidGuessError",
    "InvalidSetupError",
    "InvalidVoteError",
    "NO_ONE",
    "PhaseError",
    "Player",
    "ROLES",
    "Role",
    "UnknownPlayerError",
    "WORD_PAIRS",
    "Winner",
    "alive_players",
    "cast_vote",
    "check_win_condition",
    "continue_game",
    "create_game",
    "current_player",
    "default_player_names",
    "get_player",
    "is_infiltrator",
    "max_infiltrators",
    "next_player",
    "pending_voters",
    "pick_word_pair",
    "role_emoji",
    "role_name",
    "start_vote",
    "submit_guess",
    "tally_votes",
    "winner_name",
]
