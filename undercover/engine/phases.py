"""Game phase definitions."""

from enum import Enum
from typing import Optional


class GamePhase(Enum):
    """Phases of the Undercover game."""
    DISTRIBUTE = "distribute"        # Pass the phone, each player sees their word
    DESCRIBE = "describe"            # Each alive player describes their word
    DISCUSS = "discuss"              # Free discussion
    VOTE = "vote"                    # Alive players vote to eliminate
    REVEAL = "reveal"                # Show who was eliminated and their role
    MR_WHITE_GUESS = "mrwhite-guess"  # Eliminated Mr. White guesses the civilian word
    GAME_OVER = "gameover"           # Winner decided


class Winner(Enum):
    """Possible game outcomes."""
    CIVILIANS = "civilians"
    INFILTRATORS = "infiltrators"
    MR_WHITE = "mrwhite"


WINNER_NAMES = {
    Winner.CIVILIANS: "Civilians",
    Winner.INFILTRATORS: "Infiltrators",
    Winner.MR_WHITE: "Mr. White",
}

# Phases in which the cursor walks over players
CURSOR_PHASES = (GamePhase.DISTRIBUTE, GamePhase.DESCRIBE)


def winner_name(winner: Optional[Winner]) -> str:
    """Get a human-readable outcome."""
    if winner is None:
        return "No winner yet"
    return WINNER_NAMES[winner]


def phase_name(phase: GamePhase, round_number: int) -> str:
    """Get a log-friendly phase name with round number.

    Args:
        phase: The phase.
        round_number: Current round (1, 2, 3...).

    Returns:
        e.g. "round_2_vote", or "distribute" / "gameover" outside rounds.
    """
    if phase in (GamePhase.DISTRIBUTE, GamePhase.GAME_OVER):
        return phase.value
    return f"round_{round_number}_{phase.value.replace('-', '_')}"
