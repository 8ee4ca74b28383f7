"""
Tournament JSON Ingestion

This module reads tournament documents as returned by the tournament backend
and turns them into Tournament objects for the statistics engine.

Expected document shape (camelCase keys):
    {
        "tournamentId": 7,
        "tournamentName": "Friday Cup",
        "tournamentType": "GROUP",
        "champion": 1,
        "matches": [
            {"player1Id": 1, "player2Id": 2, "score1": 3, "score2": 1, "round": 1},
            {"player1Id": 3, "player2Id": 4, "round": 1}
        ]
    }

Only structure is checked here. Scores are passed through as-is (negative
values included); consistency of the fixture list is the generator's job.

Usage:
    from tourney.ingestion.json_loader import load_tournament_file
    tournament = load_tournament_file(Path("data/raw/tournament_7.json"))
"""

import json
from pathlib import Path

from tourney.config import DEFAULT_TOURNAMENT_TYPE, MAX_INPUT_SIZE
from tourney.stats.models import Match, Tournament, TournamentType
from tourney.utils import setup_logging, validate_input_size, validate_tournament_type

# --- Module Logger ---
logger = setup_logging(__name__)


class IngestionError(Exception):
    """Custom exception for ingestion errors"""
    pass


class ValidationError(IngestionError):
    """Validation-specific errors"""
    pass


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid id or score
    return isinstance(value, int) and not isinstance(value, bool)


def _optional_int(raw: dict, key: str, index: int) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if not _is_int(value):
        raise ValidationError(f"Match {index}: '{key}' must be an integer or null, got {value!r}")
    return value


def parse_match(raw: dict, index: int = 0) -> Match:
    """
    Parse a single match entry.

    Args:
        raw: Match dict with player1Id, player2Id and optional score1, score2, round
        index: Position in the match list, used in error messages

    Raises:
        ValidationError: If a player id is missing or a field has the wrong type
    """
    if not isinstance(raw, dict):
        raise ValidationError(f"Match {index}: expected an object, got {type(raw).__name__}")

    for key in ('player1Id', 'player2Id'):
        if not _is_int(raw.get(key)):
            raise ValidationError(f"Match {index}: '{key}' must be an integer, got {raw.get(key)!r}")

    round_number = raw.get('round')
    if round_number is None:
        round_number = 0
    elif not _is_int(round_number):
        raise ValidationError(f"Match {index}: 'round' must be an integer, got {round_number!r}")

    return Match(
        player1_id=raw['player1Id'],
        player2_id=raw['player2Id'],
        score1=_optional_int(raw, 'score1', index),
        score2=_optional_int(raw, 'score2', index),
        round=round_number,
    )


def parse_tournament(data: dict) -> Tournament:
    """
    Build a Tournament from a decoded JSON document.

    Args:
        data: Decoded tournament document

    Returns:
        Tournament with matches in document order

    Raises:
        ValidationError: If the document is not structurally valid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Tournament document must be an object, got {type(data).__name__}")

    raw_matches = data.get('matches', [])
    if raw_matches is None:
        raw_matches = []
    if not isinstance(raw_matches, list):
        raise ValidationError("'matches' must be a list")

    try:
        tournament_type = validate_tournament_type(data.get('tournamentType') or DEFAULT_TOURNAMENT_TYPE)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    champion = data.get('champion')
    if champion is not None and not _is_int(champion):
        raise ValidationError(f"'champion' must be an integer or null, got {champion!r}")

    matches = [parse_match(raw, i) for i, raw in enumerate(raw_matches)]

    unplayed = sum(1 for m in matches if not m.is_played)
    if unplayed:
        logger.debug(f"{unplayed} of {len(matches)} matches have no recorded score")

    return Tournament(
        matches=matches,
        champion=champion,
        tournament_type=TournamentType(tournament_type),
        tournament_id=data.get('tournamentId'),
        name=data.get('tournamentName'),
    )


def load_tournament_text(text: str) -> Tournament:
    """
    Parse a tournament from raw JSON text.

    Raises:
        ValidationError: If the text is too large, not JSON, or not a valid tournament
    """
    try:
        validate_input_size(text, MAX_INPUT_SIZE)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e

    return parse_tournament(data)


def load_tournament_file(path: Path) -> Tournament:
    """
    Load a tournament from a JSON file.

    Raises:
        IngestionError: If the file cannot be read
        ValidationError: If its content is not a valid tournament
    """
    try:
        text = Path(path).read_text(encoding='utf-8')
    except OSError as e:
        raise IngestionError(f"Could not read tournament file {path}: {e}") from e

    tournament = load_tournament_text(text)
    logger.info(f"Loaded {len(tournament.matches)} matches from {path}")
    return tournament
