"""
Standings Reports

This module turns computed Statistics into tabular output:
- A pandas standings table (position, player, points, goal difference, W/D/L)
- A flat highlights summary (top scorer, best defense, largest-margin match)
- CSV export of the standings for every tournament document in the input folder

Usage:
    python -m tourney.report
    OR
    from tourney.report import standings_to_frame, process_tournament
"""

import sys
from pathlib import Path

# Enable both `python tourney/report.py` and `python -m tourney.report` execution modes.
# This ensures tourney.config imports work regardless of how the script is invoked.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dataclasses import asdict
from datetime import datetime

import pandas as pd

from tourney.config import INPUT_FOLDER, OUTPUT_FOLDER, STANDINGS_COLUMNS, STRICT_MODE, TOURNAMENT_PATTERN
from tourney.ingestion.json_loader import IngestionError, load_tournament_file
from tourney.stats.engine import compute_statistics
from tourney.stats.models import Statistics
from tourney.utils import atomic_write_csv, cleanup_old_files, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def standings_to_frame(statistics: Statistics) -> pd.DataFrame:
    """
    Convert standings rows into a DataFrame.

    Returns:
        DataFrame with STANDINGS_COLUMNS, one row per player in standings
        order. position is 1-based.
    """
    if not statistics.standings:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)

    df = pd.DataFrame([asdict(row) for row in statistics.standings])
    df.insert(0, 'position', range(1, len(df) + 1))
    return df[STANDINGS_COLUMNS]


def summarize(statistics: Statistics) -> dict:
    """Flatten the three highlights into a single dict."""
    match = statistics.highest_goal_match
    return {
        'top_scorer_id': statistics.top_scorer_id,
        'top_scorer_goals': statistics.top_scorer_goals,
        'best_defense_id': statistics.best_defense_id,
        'best_defense_conceded': statistics.best_defense_conceded,
        'highest_goal_match': (
            f"{match.player1_id} {match.score1 or 0} x {match.score2 or 0} {match.player2_id}"
            if match else None
        ),
    }


def process_tournament(json_path: Path, output_prefix: str | None = None,
                       output_folder: Path | None = None, strict: bool = STRICT_MODE) -> pd.DataFrame:
    """
    Compute and export standings for one tournament document.

    Args:
        json_path: Path to the tournament JSON file
        output_prefix: Prefix for the output file (default: the JSON file stem)
        output_folder: Where to write the CSV (default: OUTPUT_FOLDER)
        strict: Skip matches with no recorded score

    Returns:
        Standings DataFrame
    """
    prefix = output_prefix or Path(json_path).stem
    target_folder = output_folder or OUTPUT_FOLDER

    tournament = load_tournament_file(json_path)
    statistics = compute_statistics(tournament, strict=strict)
    df_standings = standings_to_frame(statistics)

    label = tournament.name or prefix
    highlights = summarize(statistics)
    logger.info(f"Standings for {label} ({tournament.tournament_type.value}):")
    if not df_standings.empty:
        logger.info("\n" + df_standings.to_string(index=False))
    if tournament.champion is not None:
        logger.info(f"  Champion: player {tournament.champion}")
    logger.info(f"  Top scorer: player {highlights['top_scorer_id']} ({highlights['top_scorer_goals']} goals)")
    logger.info(f"  Best defense: player {highlights['best_defense_id']} ({highlights['best_defense_conceded']} conceded)")
    if highlights['highest_goal_match']:
        logger.info(f"  Largest margin: {highlights['highest_goal_match']}")

    date_str = datetime.now().strftime('%Y%m%d')
    output_csv = target_folder / f"{prefix}_standings_{date_str}.csv"
    atomic_write_csv(df_standings, output_csv, index=False)
    logger.info(f"Exported standings to: {output_csv}")

    cleanup_old_files(f"{prefix}_standings_*.csv", keep_file=output_csv, folder=target_folder)

    return df_standings


def main():
    """Process standings for every tournament document in INPUT_FOLDER."""
    results = {}

    input_files = sorted(INPUT_FOLDER.glob(TOURNAMENT_PATTERN))
    if not input_files:
        logger.error(f"No files matching {TOURNAMENT_PATTERN} found in {INPUT_FOLDER}")
        return results

    for json_path in input_files:
        try:
            results[json_path.stem] = process_tournament(json_path)
        except IngestionError as e:
            logger.error(f"Skipping {json_path.name}: {e}")

    logger.info(f"Processed {len(results)} of {len(input_files)} tournaments")
    return results


if __name__ == "__main__":
    results = main()
