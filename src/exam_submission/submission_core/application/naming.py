"""
Naming policy for persisted submissions.

An artifact is stored as
    <destination>/<UTC timestamp>__<sanitized user name>__<original file name>.txt
so that a directory listing sorts submissions chronologically and two
submissions of the same file by the same student never collide.
"""
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
ARTIFACT_SUFFIX = ".txt"


def sanitize_user_name(user_name: str) -> str:
    """
    Spaces and hyphens become underscores, apostrophes are dropped, result is lower-cased.
    Idempotent: sanitize_user_name(sanitize_user_name(x)) == sanitize_user_name(x).
    """
    return (
        user_name
        .replace(" ", "_")
        .replace("-", "_")
        .replace("'", "")
        .lower()
    )


def format_timestamp(moment: datetime) -> str:
    """
    ISO-8601 UTC timestamp with a `Z` designator and microsecond precision.
    Naive datetimes are assumed to already be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Inverse of format_timestamp."""
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def build_submission_filename(
    user_name: str,
    file_name: str,
    moment: datetime,
    suffix: str = ARTIFACT_SUFFIX,
) -> str:
    return f"{format_timestamp(moment)}__{sanitize_user_name(user_name)}__{file_name}{suffix}"


def build_submission_path(
    destination_path: str,
    user_name: str,
    file_name: str,
    moment: Optional[datetime] = None,
    suffix: str = ARTIFACT_SUFFIX,
) -> Path:
    """
    Full path of the artifact for a submission made at `moment` (defaults to now).
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    return Path(destination_path) / build_submission_filename(user_name, file_name, moment, suffix)
