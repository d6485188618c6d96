"""Main entry point for Undercover: a pass-the-phone terminal game."""

import sys
from typing import Callable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .config import ConfigError, GameSettings, load_settings
from .engine import (
    Game,
    GameError,
    GamePhase,
    Role,
    Winner,
    default_player_names,
    max_infiltrators,
    role_emoji,
    role_name,
    winner_name,
)
from .engine.rules import MAX_PLAYERS, MIN_PLAYERS
from .engine.transitions import is_last_turn
from .log import MarkdownLogger


# Load environment variables
load_dotenv()

console = Console()

WINNER_STYLES = {
    Winner.CIVILIANS: "green",
    Winner.INFILTRATORS: "red",
    Winner.MR_WHITE: "magenta",
}


def display_welcome():
    """Display welcome message."""
    console.print(Panel.fit(
        "[bold magenta]UNDERCOVER[/bold magenta]\n"
        "[dim]A word party game for one phone[/dim]",
        border_style="magenta",
    ))
    console.print()


def display_error(error: Exception):
    """Show a rejected action without stopping the game."""
    console.print(f"[red]{error}[/red]")


def wait(message: str = "Press Enter to continue..."):
    """Pause until the player presses Enter."""
    console.print(f"[yellow]{message}[/yellow]")
    input()


def ask_count(label: str, default: Optional[int], minimum: int, maximum: int) -> int:
    """Ask for a number until it falls within the bounds.

    With no default the player has to type a number.
    """
    prompt = f"{label} [dim]({minimum}-{maximum})[/dim]"
    while True:
        if default is None:
            value = IntPrompt.ask(prompt)
        else:
            value = IntPrompt.ask(prompt, default=default)
        if minimum <= value <= maximum:
            return value
        display_error(f"Please enter a number between {minimum} and {maximum}.")


def setup_table(settings: GameSettings) -> tuple[list[str], int, int]:
    """Ask for the player count, faction sizes and names."""
    console.print(Panel("[bold]Game Setup[/bold]", border_style="cyan"))

    player_count = ask_count("Players", settings.player_count, MIN_PLAYERS, MAX_PLAYERS)
    limit = max_infiltrators(player_count)

    while True:
        num_undercover = ask_count(
            "Undercover", min(settings.num_undercover, limit), 0, limit,
        )
        mr_white_limit = limit - num_undercover
        num_mr_white = ask_count(
            "Mr. White", min(settings.num_mr_white, mr_white_limit), 0, mr_white_limit,
        )
        if num_undercover + num_mr_white > 0:
            break
        display_error("Add at least 1 Undercover or Mr. White.")

    civilians = player_count - num_undercover - num_mr_white
    console.print(
        f"[dim]{civilians} Civilians, {num_undercover} Undercover, "
        f"{num_mr_white} Mr. White[/dim]\n"
    )

    console.print("[bold]Player names[/bold] [dim](leave blank for the default)[/dim]")
    configured = settings.seat_names()
    raw_names = []
    for seat in range(player_count):
        default = configured[seat] if seat < len(configured) else ""
        raw_names.append(Prompt.ask(f"Seat {seat + 1}", default=default or f"Player {seat + 1}"))

    return default_player_names(raw_names), num_undercover, num_mr_white


def distribute_screen(game: Game):
    """Show one player their secret word, then hide it again."""
    player = game.current_player
    position = game.state.current_player_index + 1
    total = len(game.state.players)

    console.clear()
    console.print(Panel(
        f"Pass the phone to:\n\n[bold cyan]{player.name}[/bold cyan]\n\n"
        f"[dim]{position} / {total}[/dim]",
        border_style="cyan",
    ))
    wait("Press Enter to see your word...")

    if player.role == Role.MR_WHITE:
        body = (
            f"{player.name}, you are:\n\n{role_emoji(player.role)} "
            f"[bold magenta]{role_name(player.role)}[/bold magenta]\n\n"
            "[dim]You have no word. Bluff your way through![/dim]"
        )
    else:
        body = f"{player.name}, your word is:\n\n[bold]{player.word}[/bold]"
    console.print(Panel(body, border_style="magenta"))

    if is_last_turn(game.state):
        wait("Memorize your word. Press Enter to start the game...")
    else:
        wait("Memorize your word. Press Enter, then pass the phone...")
    console.clear()
    game.next_player()


def describe_screen(game: Game):
    """Call each alive player in turn to describe their word."""
    player = game.current_player
    position = game.state.current_player_index + 1
    total = len(game.alive_players)

    console.print(Panel(
        f"[dim]Round {game.state.round} - Description ({position} / {total})[/dim]\n\n"
        f"[bold]{player.name}'s turn[/bold]\n\n"
        "Say one word or a short phrase that describes your secret word.",
        border_style="blue",
    ))
    if is_last_turn(game.state):
        wait("Press Enter when everyone has described...")
    else:
        wait("Press Enter for the next player...")
    game.next_player()


def discuss_screen(game: Game):
    """Free discussion, then open the ballot."""
    console.print(Panel(
        "[bold]Discussion Time[/bold]\n\n"
        "Debate who the Undercover or Mr. White might be.",
        border_style="yellow",
    ))
    wait("Press Enter to proceed to the vote...")
    game.start_vote()


def vote_screen(game: Game):
    """Collect one private vote from the next player who has not voted."""
    voter = game.pending_voters()[0]
    candidates = [p for p in game.alive_players if p.id != voter.id]

    console.clear()
    console.print(Panel(
        f"Pass the phone to:\n\n[bold cyan]{voter.name}[/bold cyan]",
        border_style="red",
    ))
    table = Table(title=f"{voter.name}, who do you vote to eliminate?", show_header=False)
    table.add_column("#", style="dim")
    table.add_column("Player", style="cyan")
    for number, candidate in enumerate(candidates, start=1):
        table.add_row(str(number), candidate.name)
    console.print(table)

    choice = ask_count("Your vote", None, 1, len(candidates))
    try:
        game.cast_vote(voter.id, candidates[choice - 1].id)
    except GameError as e:
        display_error(e)
    console.clear()


def reveal_screen(game: Game):
    """Show who was voted out and what they were."""
    player = game.eliminated_player
    body = (
        f"[bold]{player.name}[/bold]\n"
        f"was {role_emoji(player.role)} [bold]{role_name(player.role)}[/bold]"
    )
    if player.word:
        body += f"\n\n[dim]Their word was:[/dim] [bold]{player.word}[/bold]"
    console.print(Panel(body, title="Eliminated!", border_style="red"))
    wait()
    game.continue_game()


def mr_white_guess_screen(game: Game):
    """Give the eliminated Mr. White one guess at the civilian word."""
    player = game.eliminated_player
    console.print(Panel(
        f"{role_emoji(player.role)} [bold]Mr. White's Last Chance![/bold]\n\n"
        f"{player.name}, you were caught! But you can still win "
        "by guessing the Civilians' word.",
        border_style="magenta",
    ))
    guess = Prompt.ask("Your guess")
    try:
        game.submit_guess(guess)
    except GameError as e:
        display_error(e)
        return

    if game.winner == Winner.MR_WHITE:
        console.print("[bold magenta]Correct![/bold magenta]")
    else:
        console.print("[red]Wrong guess.[/red]")


PHASE_SCREENS: dict[GamePhase, Callable[[Game], None]] = {
    GamePhase.DISTRIBUTE: distribute_screen,
    GamePhase.DESCRIBE: describe_screen,
    GamePhase.DISCUSS: discuss_screen,
    GamePhase.VOTE: vote_screen,
    GamePhase.REVEAL: reveal_screen,
    GamePhase.MR_WHITE_GUESS: mr_white_guess_screen,
}


def play(game: Game):
    """Run screens until the game is over."""
    while game.phase != GamePhase.GAME_OVER:
        PHASE_SCREENS[game.phase](game)


def display_results(game: Game):
    """Display game results."""
    state = game.state
    style = WINNER_STYLES[state.winner]

    console.print()
    console.print(Panel(
        f"[bold {style}]{winner_name(state.winner).upper()} WIN![/bold {style}]\n\n"
        f"Civilian word: [bold green]{state.civilian_word}[/bold green]\n"
        f"Undercover word: [bold red]{state.undercover_word}[/bold red]",
        border_style=style,
    ))

    table = Table(title="Players", show_header=True, header_style="bold")
    table.add_column("Player", style="cyan")
    table.add_column("Role", style="magenta")
    table.add_column("Word")
    table.add_column("Status", style="green")

    for player in state.players:
        status = "[green]Survived[/green]" if player.alive else "[red]Eliminated[/red]"
        table.add_row(
            player.name,
            f"{role_emoji(player.role)} {role_name(player.role)}",
            player.word or "[dim]-[/dim]",
            status,
        )

    console.print(table)
    console.print()

    if game.logger.game_dir:
        console.print(f"[dim]Game log saved to: {game.logger.game_dir}[/dim]")


def main():
    """Main entry point."""
    display_welcome()

    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        settings = load_settings(config_path)
    except (ValidationError, ConfigError) as e:
        console.print(f"[red]Invalid configuration:[/red]\n{e}")
        sys.exit(1)

    game = Game(
        logger=MarkdownLogger(base_dir=settings.log_dir),
        word_pairs=settings.word_pairs(),
    )

    while True:
        names, num_undercover, num_mr_white = setup_table(settings)
        try:
            game.start(names, num_undercover, num_mr_white)
        except GameError as e:
            display_error(e)
            continue

        play(game)
        display_results(game)

        if not Confirm.ask("Play again?", default=True):
            break
        game.new_game()
        console.clear()


def run():
    """Entry point for the CLI."""
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    run()
