"""
Tournament Statistics Engine

This module turns a tournament's match list into a ranked statistical summary:
- Per-player aggregates (goals scored/conceded, wins, draws, losses, points)
- Standings ordered by points, then goal difference
- Highlights: top scorer, best defense and the largest-margin match

Usage:
    from tourney.stats import compute_statistics
    statistics = compute_statistics(tournament)
"""

from tourney.config import (
    HIGHEST_MARGIN_SENTINEL,
    POINTS_DRAW,
    POINTS_LOSS,
    POINTS_WIN,
    STRICT_MODE,
)
from tourney.stats.models import (
    HighestGoalMatch,
    Match,
    PlayerAggregate,
    StandingsRow,
    Statistics,
    Tournament,
)
from tourney.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def match_scores(match: Match) -> tuple[int, int]:
    """Return the match scores with missing values counted as 0."""
    score1 = match.score1 if match.score1 is not None else 0
    score2 = match.score2 if match.score2 is not None else 0
    return score1, score2


def match_outcome(match: Match) -> tuple[str, str]:
    """
    Classify a match from each side's point of view.

    Returns:
        ("win", "loss"), ("loss", "win") or ("draw", "draw").
        A match with no recorded score is a draw.
    """
    score1, score2 = match_scores(match)
    if score1 > score2:
        return "win", "loss"
    elif score2 > score1:
        return "loss", "win"
    return "draw", "draw"


def group_matches_by_round(matches: list[Match]) -> dict[int, list[Match]]:
    """Group matches by round in ascending round order, input order within a round."""
    rounds: dict[int, list[Match]] = {}
    for match in matches:
        rounds.setdefault(match.round, []).append(match)
    return dict(sorted(rounds.items()))


def apply_match(aggregates: dict[int, PlayerAggregate], match: Match) -> None:
    """
    Fold one match into the per-player aggregates.

    Players are created zero-initialised the first time they are seen, so the
    mapping's insertion order is the order of first appearance.
    """
    p1 = aggregates.setdefault(match.player1_id, PlayerAggregate())
    p2 = aggregates.setdefault(match.player2_id, PlayerAggregate())
    score1, score2 = match_scores(match)

    p1.scored += score1
    p1.conceded += score2
    p2.scored += score2
    p2.conceded += score1

    outcome1, outcome2 = match_outcome(match)
    for agg, outcome in ((p1, outcome1), (p2, outcome2)):
        if outcome == "win":
            agg.wins += 1
            agg.points += POINTS_WIN
        elif outcome == "loss":
            agg.losses += 1
            agg.points += POINTS_LOSS
        else:
            agg.draws += 1
            agg.points += POINTS_DRAW


def build_standings(aggregates: dict[int, PlayerAggregate]) -> list[StandingsRow]:
    """
    Build standings rows sorted by points desc, then goal difference desc.

    sorted() is stable, so players level on both keep first-appearance order.
    """
    rows = [
        StandingsRow(
            player_id=player_id,
            points=agg.points,
            goal_difference=agg.goal_difference,
            wins=agg.wins,
            draws=agg.draws,
            losses=agg.losses,
        )
        for player_id, agg in aggregates.items()
    ]
    return sorted(rows, key=lambda row: (-row.points, -row.goal_difference))


def compute_statistics(tournament: Tournament | None, strict: bool = STRICT_MODE) -> Statistics:
    """
    Compute standings and highlights for one tournament.

    Args:
        tournament: Tournament to summarise, or None
        strict: When True, matches with neither score recorded are skipped.
                By default they count as 0-0 draws.

    Returns:
        Statistics. A missing tournament or an empty match list yields
        zeroed highlights and empty standings.
    """
    if tournament is None or not tournament.matches:
        return Statistics()

    matches = tournament.matches
    if strict:
        matches = [m for m in matches if m.is_played]
        skipped = len(tournament.matches) - len(matches)
        if skipped:
            logger.debug(f"Strict mode: skipped {skipped} unplayed matches")
        if not matches:
            return Statistics()

    aggregates: dict[int, PlayerAggregate] = {}
    highest_margin = HIGHEST_MARGIN_SENTINEL
    highest_goal_match = None

    for match in matches:
        apply_match(aggregates, match)

        score1, score2 = match_scores(match)
        margin = abs(score1 - score2)
        if margin > highest_margin:
            highest_margin = margin
            highest_goal_match = HighestGoalMatch(
                player1_id=match.player1_id,
                player2_id=match.player2_id,
                score1=match.score1,
                score2=match.score2,
            )

    top_scorer_id = None
    top_scorer_goals = 0
    best_defense_id = None
    best_defense_conceded = 0
    max_scored = None
    min_conceded = None

    # Strict comparisons: ties go to the player seen first
    for player_id, agg in aggregates.items():
        if max_scored is None or agg.scored > max_scored:
            max_scored = agg.scored
            top_scorer_id = player_id
            top_scorer_goals = agg.scored
        if min_conceded is None or agg.conceded < min_conceded:
            min_conceded = agg.conceded
            best_defense_id = player_id
            best_defense_conceded = agg.conceded

    logger.debug(
        f"Computed statistics for {len(matches)} matches, {len(aggregates)} players"
    )

    return Statistics(
        top_scorer_id=top_scorer_id,
        top_scorer_goals=top_scorer_goals,
        best_defense_id=best_defense_id,
        best_defense_conceded=best_defense_conceded,
        highest_goal_match=highest_goal_match,
        standings=build_standings(aggregates),
    )
