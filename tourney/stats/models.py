"""
Tournament and Statistics Types

Plain data containers passed into and returned from the statistics engine.
Nothing here holds state across calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TournamentType(str, Enum):
    """Tournament format. Only used by rendering, never by the statistics."""

    GROUP = "GROUP"
    ELIMINATORY = "ELIMINATORY"


@dataclass(frozen=True)
class Match:
    """One pairing in a round. Scores are None until recorded."""

    player1_id: int
    player2_id: int
    score1: int | None = None
    score2: int | None = None
    round: int = 0

    @property
    def is_played(self) -> bool:
        return self.score1 is not None or self.score2 is not None


@dataclass
class Tournament:
    """A tournament as handed over by the generator."""

    matches: list[Match] = field(default_factory=list)
    champion: int | None = None  # supplied by the generator, not derived
    tournament_type: TournamentType = TournamentType.GROUP
    tournament_id: int | None = None
    name: str | None = None


@dataclass
class PlayerAggregate:
    """Running totals for one player while matches are folded in."""

    scored: int = 0
    conceded: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.scored - self.conceded


@dataclass(frozen=True)
class StandingsRow:
    """One player's line in the standings table."""

    player_id: int
    points: int
    goal_difference: int
    wins: int
    draws: int
    losses: int


@dataclass(frozen=True)
class HighestGoalMatch:
    """Largest-margin match, with the scores exactly as recorded."""

    player1_id: int
    player2_id: int
    score1: int | None
    score2: int | None


@dataclass
class Statistics:
    """Standings plus the three highlights for one tournament."""

    top_scorer_id: int | None = None
    top_scorer_goals: int = 0
    best_defense_id: int | None = None
    best_defense_conceded: int = 0
    highest_goal_match: HighestGoalMatch | None = None
    standings: list[StandingsRow] = field(default_factory=list)
