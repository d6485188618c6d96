"""Phase transitions.

Every function takes a GameState and returns a new one. The order is fixed:

    distribute -> describe -> discuss -> vote -> reveal | mrwhite-guess
    reveal / mrwhite-guess -> gameover | describe (next round)
"""

from dataclasses import replace

from .errors import InvalidGuessError, InvalidVoteError, PhaseError
from .phases import CURSOR_PHASES, GamePhase, Winner
from .roles import Role
from .rules import alive_players, check_win_condition, get_player, tally_votes, NO_ONE
from .state import GameState, Player


def _require_phase(state: GameState, *phases: GamePhase, action: str) -> None:
    if state.phase not in phases:
        expected = " or ".join(p.value for p in phases)
        raise PhaseError(
            f"Cannot {action} during the {state.phase.value} phase (needs {expected})"
        )


def _turn_order(state: GameState) -> list[Player]:
    """Players the cursor walks over in the current phase."""
    if state.phase == GamePhase.DISTRIBUTE:
        return list(state.players)
    return alive_players(state)


def current_player(state: GameState) -> Player:
    """The player whose turn it is to see their word or describe it."""
    _require_phase(state, *CURSOR_PHASES, action="take a turn")
    order = _turn_order(state)
    if not 0 <= state.current_player_index < len(order):
        raise PhaseError(f"Turn cursor {state.current_player_index} is out of range")
    return order[state.current_player_index]


def is_last_turn(state: GameState) -> bool:
    """True when the current player is the last one in this phase."""
    return state.current_player_index >= len(_turn_order(state)) - 1


def next_player(state: GameState) -> GameState:
    """Hand the phone to the next player, or move on after the last one.

    The distribute phase visits every seat once. The describe phase only
    visits players still in the game.
    """
    _require_phase(state, *CURSOR_PHASES, action="advance the turn")

    if not is_last_turn(state):
        return replace(state, current_player_index=state.current_player_index + 1)

    if state.phase == GamePhase.DISTRIBUTE:
        return replace(state, phase=GamePhase.DESCRIBE, current_player_index=0)
    return replace(state, phase=GamePhase.DISCUSS, current_player_index=0)


def start_vote(state: GameState) -> GameState:
    """End the discussion and open a fresh ballot."""
    _require_phase(state, GamePhase.DISCUSS, action="start the vote")
    return replace(state, phase=GamePhase.VOTE).with_votes({})


def pending_voters(state: GameState) -> list[Player]:
    """Alive players who have not voted yet."""
    return [p for p in alive_players(state) if p.id not in state.votes]


def cast_vote(state: GameState, voter_id: int, target_id: int) -> GameState:
    """Record a vote. A second vote from the same player replaces the first.

    Once every alive player has voted the ballot is resolved right away: the
    most voted player is eliminated and the phase moves to mrwhite-guess if
    that player is Mr. White, or to reveal otherwise.

    Raises:
        PhaseError: Outside the vote phase.
        UnknownPlayerError: If either id is not in the game.
        InvalidVoteError: For a self-vote or an eliminated voter or target.
    """
    _require_phase(state, GamePhase.VOTE, action="vote")

    voter = get_player(state, voter_id)
    target = get_player(state, target_id)
    if not voter.alive:
        raise InvalidVoteError(f"{voter.name} has been eliminated and cannot vote")
    if not target.alive:
        raise InvalidVoteError(f"{target.name} has already been eliminated")
    if voter.id == target.id:
        raise InvalidVoteError(f"{voter.name} cannot vote for themselves")

    votes = dict(state.votes)
    votes[voter.id] = target.id
    state = state.with_votes(votes)

    if pending_voters(state):
        return state
    return _resolve_votes(state)


def _resolve_votes(state: GameState) -> GameState:
    eliminated_id = tally_votes(state)
    if eliminated_id is NO_ONE:
        raise PhaseError("Cannot resolve a vote nobody has cast")

    players = tuple(
        p.eliminated() if p.id == eliminated_id else p for p in state.players
    )
    state = replace(state, players=players, eliminated_player_id=eliminated_id)

    if get_player(state, eliminated_id).role == Role.MR_WHITE:
        return replace(state, phase=GamePhase.MR_WHITE_GUESS)

    return replace(state, phase=GamePhase.REVEAL, winner=check_win_condition(state))


def is_correct_guess(state: GameState, guess: str) -> bool:
    """Compare a guess to the civilian word, ignoring case and outer spaces."""
    return guess.strip().casefold() == state.civilian_word.strip().casefold()


def submit_guess(state: GameState, guess: str) -> GameState:
    """Resolve the eliminated Mr. White's guess of the civilian word.

    A right guess wins the game for Mr. White on the spot. A wrong one falls
    back to the usual win check, and the game continues if nobody has won.
    """
    _require_phase(state, GamePhase.MR_WHITE_GUESS, action="guess the word")
    if not guess.strip():
        raise InvalidGuessError("The guess cannot be empty")

    if is_correct_guess(state, guess):
        return replace(state, winner=Winner.MR_WHITE, phase=GamePhase.GAME_OVER)

    winner = check_win_condition(state)
    if winner is not None:
        return replace(state, winner=winner, phase=GamePhase.GAME_OVER)
    return _next_round(state)


def continue_game(state: GameState) -> GameState:
    """Leave the reveal screen."""
    _require_phase(state, GamePhase.REVEAL, action="continue")
    if state.winner is not None:
        return replace(state, phase=GamePhase.GAME_OVER)
    return _next_round(state)


def _next_round(state: GameState) -> GameState:
    return replace(
        state,
        phase=GamePhase.DESCRIBE,
        current_player_index=0,
        eliminated_player_id=None,
        round=state.round + 1,
    ).with_votes({})
