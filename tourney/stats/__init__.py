"""
Tournament Statistics

Modules:
- models: Match, Tournament and Statistics types
- engine: Standings and highlight computation
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "compute_statistics":
        from tourney.stats.engine import compute_statistics
        return compute_statistics
    if name == "group_matches_by_round":
        from tourney.stats.engine import group_matches_by_round
        return group_matches_by_round
    if name == "match_outcome":
        from tourney.stats.engine import match_outcome
        return match_outcome
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
