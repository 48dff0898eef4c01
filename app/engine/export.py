"""
CSV export of a player's training history.
"""

import csv
import io
import re
import unicodedata
from typing import Iterable

from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession

CSV_HEADERS = ["Date", "Trainer", "Score", "Goals", "Best Streak", "Avg Speed of Play", "Balls Played", "Exercises",
               "Start Time", "End Time", ]


def _format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else str(score)


def _row(session: TrainingSession) -> list[str]:
    return [session.start_time.date().isoformat(), session.trainer_name, _format_score(session.score),
            str(session.number_of_goals), str(session.best_streak), f"{session.avg_speed_of_play:.2f}",
            str(session.number_of_balls), str(session.number_of_exercises), session.start_time.isoformat(),
            session.end_time.isoformat(), ]


def export_sessions_csv(sessions: Iterable[TrainingSession]) -> str:
    """Render *sessions* as CSV.

    The header row is bare; every data cell is double-quoted with inner
    quotes doubled.  Rows are ``\\n``-separated with no trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for session in sessions:
        writer.writerow(_row(session))
    body = buffer.getvalue().rstrip("\n")
    header = ",".join(CSV_HEADERS)
    return f"{header}\n{body}" if body else header


def _slugify(name: str) -> str:
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")


def export_filename(profile: PlayerProfile) -> str:
    """Download name, e.g. ``training-history-sabrina-williams.csv``.

    The name is folded to ASCII so it is safe in a ``Content-Disposition``
    header; a name with no ASCII letters yields ``training-history.csv``.
    """
    slug = _slugify(profile.full_name)
    return f"training-history-{slug}.csv" if slug else "training-history.csv"
