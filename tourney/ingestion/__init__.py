"""
Tournament Ingestion

Modules:
- json_loader: Parse tournament JSON documents
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "parse_tournament":
        from tourney.ingestion.json_loader import parse_tournament
        return parse_tournament
    if name == "load_tournament_file":
        from tourney.ingestion.json_loader import load_tournament_file
        return load_tournament_file
    if name == "load_tournament_text":
        from tourney.ingestion.json_loader import load_tournament_text
        return load_tournament_text
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
