"""Role definitions for the Undercover game."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class Role(Enum):
    """A player's secret role."""
    CIVILIAN = "civilian"
    UNDERCOVER = "undercover"
    MR_WHITE = "mrwhite"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RoleInfo:
    """Static display data for a role."""

    name: str
    emoji: str
    team: Literal["civilians", "infiltrators"]
    description: str = ""


# All available roles
ROLES = {
    Role.CIVILIAN: RoleInfo(
        name="Civilian",
        emoji="\U0001F9D1",
        team="civilians",
        description="You know the civilian word. Find the players whose word is different."
    ),
    Role.UNDERCOVER: RoleInfo(
        name="Undercover",
        emoji="\U0001F575\uFE0F",
        team="infiltrators",
        description="Your word is close to the civilians' word, but not the same. Blend in."
    ),
    Role.MR_WHITE: RoleInfo(
        name="Mr. White",
        emoji="\U0001F47B",
        team="infiltrators",
        description="You have no word. Bluff, and if you are caught, guess the civilian word."
    ),
}


def role_name(role: Role) -> str:
    """Display name for a role."""
    return ROLES[role].name


def role_emoji(role: Role) -> str:
    """Display glyph for a role."""
    return ROLES[role].emoji


def is_infiltrator(role: Role) -> bool:
    """Undercover and Mr. White play against the civilians."""
    return ROLES[role].team == "infiltrators"
