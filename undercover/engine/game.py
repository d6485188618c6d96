"""Game session: owns the current state and records what happens."""

import random
from typing import Optional, Sequence

from ..log.markdown_logger import MarkdownLogger
from . import transitions
from .errors import PhaseError
from .phases import GamePhase, Winner, phase_name, winner_name
from .roles import role_name
from .rules import alive_players, create_game, get_player
from .state import GameState, Player
from .words import WORD_PAIRS, WordPair


class Game:
    """One table of players, one game at a time.

    The engine functions are pure; this class holds the single current
    snapshot, swaps it for the result of each action and writes the game log.
    """

    def __init__(
        self,
        logger: Optional[MarkdownLogger] = None,
        word_pairs: Sequence[WordPair] = WORD_PAIRS,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the session.

        Args:
            logger: Markdown logger. Defaults to a disabled one.
            word_pairs: Table to draw secret words from.
            rng: Random source, for reproducible games.
        """
        self.logger = logger or MarkdownLogger(base_dir=None)
        self.word_pairs = tuple(word_pairs)
        self.rng = rng
        self._state: Optional[GameState] = None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise PhaseError("No game in progress")
        return self._state

    @property
    def in_progress(self) -> bool:
        return self._state is not None

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def winner(self) -> Optional[Winner]:
        return self.state.winner

    @property
    def alive_players(self) -> list[Player]:
        """Get all alive players."""
        return alive_players(self.state)

    @property
    def current_player(self) -> Player:
        return transitions.current_player(self.state)

    @property
    def eliminated_player(self) -> Optional[Player]:
        """The player voted out this round, if any."""
        if self.state.eliminated_player_id is None:
            return None
        return get_player(self.state, self.state.eliminated_player_id)

    def start(
        self,
        names: Sequence[str],
        num_undercover: int,
        num_mr_white: int,
    ) -> GameState:
        """Deal roles and words for a new game.

        Args:
            names: Player names in seat order.
            num_undercover: How many Undercover players.
            num_mr_white: How many Mr. White players.

        Returns:
            The initial state.
        """
        state = create_game(
            names, num_undercover, num_mr_white,
            rng=self.rng, word_pairs=self.word_pairs,
        )
        self._state = state

        self.logger.start_game()
        self.logger.log_setup(
            players=[{
                "name": p.name,
                "role": role_name(p.role),
                "word": p.word,
            } for p in state.players],
            civilian_word=state.civilian_word,
            undercover_word=state.undercover_word,
        )
        self.logger.log_phase_start(phase_name(state.phase, state.round))
        return state

    def next_player(self) -> GameState:
        """Move the turn cursor on."""
        return self._apply(transitions.next_player(self.state))

    def start_vote(self) -> GameState:
        """End the discussion and open the ballot."""
        return self._apply(transitions.start_vote(self.state))

    def pending_voters(self) -> list[Player]:
        return transitions.pending_voters(self.state)

    def cast_vote(self, voter_id: int, target_id: int) -> GameState:
        """Record a vote; the last one resolves the ballot."""
        return self._apply(transitions.cast_vote(self.state, voter_id, target_id))

    def submit_guess(self, guess: str) -> GameState:
        """Resolve Mr. White's guess of the civilian word."""
        state = self.state
        new_state = transitions.submit_guess(state, guess)
        self.logger.log_guess(
            get_player(state, state.eliminated_player_id).name,
            guess,
            correct=new_state.winner == Winner.MR_WHITE,
        )
        return self._apply(new_state)

    def continue_game(self) -> GameState:
        """Leave the reveal screen."""
        return self._apply(transitions.continue_game(self.state))

    def new_game(self) -> None:
        """Discard the current game (play again)."""
        self._state = None

    def _apply(self, new_state: GameState) -> GameState:
        """Replace the current snapshot and log what changed."""
        old_state = self.state
        self._state = new_state

        if old_state.phase == GamePhase.VOTE and new_state.phase != GamePhase.VOTE:
            self._log_ballot(old_state.round, new_state)

        if new_state.phase != old_state.phase:
            if new_state.phase == GamePhase.GAME_OVER:
                self._log_game_end(new_state)
            else:
                self.logger.log_phase_start(phase_name(new_state.phase, new_state.round))

        return new_state

    def _log_ballot(self, round_number: int, state: GameState) -> None:
        names = {p.id: p.name for p in state.players}
        eliminated = get_player(state, state.eliminated_player_id)
        self.logger.log_vote(
            phase_name(GamePhase.VOTE, round_number),
            {names[voter]: names[target] for voter, target in state.votes.items()},
            eliminated.name,
        )
        self.logger.log_elimination(eliminated.name, role_name(eliminated.role))

    def _log_game_end(self, state: GameState) -> None:
        self.logger.log_game_end(
            winner=winner_name(state.winner),
            rounds=state.round,
            surviving_players=[{
                "name": p.name,
                "role": role_name(p.role),
            } for p in alive_players(state)],
            all_players=[{
                "name": p.name,
                "role": role_name(p.role),
                "word": p.word,
                "alive": p.alive,
            } for p in state.players],
        )
