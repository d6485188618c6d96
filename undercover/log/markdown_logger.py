"""Markdown logger for game events, for reviewing a game after it ends."""

from datetime import datetime
from pathlib import Path
from typing import Optional


class MarkdownLogger:
    """Writes game events and votes to markdown files.

    With no base directory the logger is disabled and every call is a no-op.
    """

    def __init__(self, base_dir: Optional[str] = "games"):
        """Initialize the logger.

        Args:
            base_dir: Base directory for game logs, or None to disable logging.
        """
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.game_dir: Optional[Path] = None
        self.game_id: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self.base_dir is not None

    @property
    def game_file(self) -> Optional[Path]:
        if self.game_dir is None:
            return None
        return self.game_dir / "game_state.md"

    def start_game(self, game_id: Optional[str] = None) -> Optional[Path]:
        """Start logging a new game.

        Args:
            game_id: Optional game identifier. If not provided, uses timestamp.

        Returns:
            Path to the game directory, or None when disabled.
        """
        if not self.enabled:
            return None

        if game_id is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S_%f")
            game_id = f"game_{timestamp}"

        self.game_id = game_id
        self.game_dir = self.base_dir / game_id
        self.game_dir.mkdir(parents=True, exist_ok=True)

        self._write_game_header()

        return self.game_dir

    def _write_game_header(self) -> None:
        with open(self.game_file, "w", encoding="utf-8") as f:
            f.write(f"# Undercover Game - {self.game_id}\n\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
            f.write("---\n\n")

    def _append(self, text: str) -> None:
        if self.game_file is None:
            return
        with open(self.game_file, "a", encoding="utf-8") as f:
            f.write(text)

    def log_setup(
        self,
        players: list[dict],
        civilian_word: str,
        undercover_word: str,
    ) -> None:
        """Log the table setup.

        Args:
            players: Player info dicts (name, role, word).
            civilian_word: Word given to civilians.
            undercover_word: Word given to undercover players.
        """
        lines = [
            "## Words\n\n",
            f"- Civilians: **{civilian_word}**\n",
            f"- Undercover: **{undercover_word}**\n\n",
            "## Players\n\n",
            "| Seat | Player | Role (Hidden) | Word |\n",
            "|------|--------|---------------|------|\n",
        ]
        for seat, p in enumerate(players, start=1):
            word = p.get("word") or "-"
            lines.append(f"| {seat} | {p['name']} | {p['role']} | {word} |\n")
        lines.append("\n---\n\n")
        self._append("".join(lines))

    def log_phase_start(self, phase: str) -> None:
        """Log the start of a game phase.

        Args:
            phase: Phase name (e.g., "distribute", "round_1_describe").
        """
        self._append(f"## {phase.replace('_', ' ').title()}\n\n")

    def log_vote(
        self,
        phase: str,
        votes: dict[str, str],
        eliminated: Optional[str],
    ) -> None:
        """Log voting results to their own file.

        Args:
            phase: Phase name.
            votes: Mapping of voter to voted-for, in casting order.
            eliminated: Name of eliminated player.
        """
        if self.game_dir is None:
            return

        votes_dir = self.game_dir / "votes"
        votes_dir.mkdir(exist_ok=True)

        filename = f"{phase}.md"
        filepath = votes_dir / filename

        vote_counts: dict[str, list[str]] = {}
        for voter, target in votes.items():
            vote_counts.setdefault(target, []).append(voter)

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(f"# Voting - {phase.replace('_', ' ').title()}\n\n")

            f.write("## Individual Votes\n\n")
            f.write("| Voter | Voted For |\n")
            f.write("|-------|-----------|\n")
            for voter, target in votes.items():
                f.write(f"| {voter} | {target} |\n")

            f.write("\n## Vote Totals\n\n")
            for target, voters in sorted(vote_counts.items(), key=lambda x: -len(x[1])):
                f.write(f"- **{target}**: {len(voters)} votes ({', '.join(voters)})\n")

            f.write("\n## Result\n\n")
            if eliminated:
                f.write(f"**{eliminated}** was eliminated by the table.\n")
            else:
                f.write("*No elimination.*\n")

        self._append(f"*See [votes/{filename}](./votes/{filename}) for the full ballot*\n\n")

    def log_elimination(
        self,
        player_name: str,
        role_revealed: str,
    ) -> None:
        """Log a player being voted out.

        Args:
            player_name: Who was eliminated.
            role_revealed: Their role, revealed on elimination.
        """
        self._append(
            "### Elimination\n\n"
            f"**{player_name}** was eliminated.\n"
            f"*They were {role_revealed}.*\n\n"
        )

    def log_guess(self, player_name: str, guess: str, correct: bool) -> None:
        """Log Mr. White's last-chance guess."""
        result = "correct" if correct else "wrong"
        self._append(
            "### Mr. White's Guess\n\n"
            f"**{player_name}** guessed *{guess.strip()}* ({result}).\n\n"
        )

    def log_game_end(
        self,
        winner: str,
        rounds: int,
        surviving_players: list[dict],
        all_players: list[dict],
    ) -> None:
        """Log the game ending.

        Args:
            winner: Winning side name.
            rounds: Rounds played.
            surviving_players: Players still alive.
            all_players: All players with roles revealed.
        """
        lines = [
            "---\n\n",
            "# GAME OVER\n\n",
            f"## Winner: {winner.upper()}\n\n",
            f"Rounds played: {rounds}\n\n",
            "## Survivors\n\n",
        ]
        if surviving_players:
            for p in surviving_players:
                lines.append(f"- {p['name']} ({p['role']})\n")
        else:
            lines.append("*No survivors*\n")

        lines.append("\n## All Players\n\n")
        lines.append("| Player | Role | Word | Survived |\n")
        lines.append("|--------|------|------|----------|\n")
        for p in all_players:
            survived = "Yes" if p.get("alive", False) else "No"
            word = p.get("word") or "-"
            lines.append(f"| {p['name']} | {p['role']} | {word} | {survived} |\n")

        lines.append(f"\n\nEnded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        self._append("".join(lines))
