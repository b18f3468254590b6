"""
Display strings derived from a single program record.
"""

import re

WHITESPACE_RE = re.compile(r"\s+")
REPETITIONS_UNIT = "repetitions"
VIDEO_FIELDS = ("instructionVideo1", "instructionVideo2")


def format_range(minimum, maximum):
    """Collapse a min/max pair to one value when both strings match."""
    if minimum == maximum:
        return minimum
    return f"{minimum}-{maximum}"


def format_sets(record):
    return format_range(record.get("setsMin", ""), record.get("setsMax", ""))


def format_reps(record):
    return format_range(record.get("repsMin", ""), record.get("repsMax", ""))


def is_repetitions(record):
    return record.get("repsUnit", "") == REPETITIONS_UNIT


def reps_label(record):
    """'Reps' for repetition-based work, 'Duration' for anything else."""
    return "Reps" if is_repetitions(record) else "Duration"


def reps_value(record):
    """Rep range, followed by the raw unit for non-repetition work."""
    reps = format_reps(record)
    if is_repetitions(record):
        return reps
    unit = record.get("repsUnit", "")
    return f"{reps} {unit}".strip() if unit else reps


def is_warmup(record):
    return record.get("warmup", "") == "1"


def get_video_links(record):
    """
    Collect non-empty instruction video URLs.

    Returns:
        List of (label, url) tuples numbered from "Video 1"; empty when the
        record has no videos
    """
    urls = [record.get(field, "") for field in VIDEO_FIELDS]
    urls = [url for url in urls if url]
    return [(f"Video {index}", url) for index, url in enumerate(urls, start=1)]


def build_exercise_id(day, record):
    """Stable id for an exercise: day, order number and name, whitespace as hyphens."""
    raw_id = f"{day}-{record.get('activityOrderNr', '')}-{record.get('activity', '')}"
    return WHITESPACE_RE.sub("-", raw_id)


def format_exercise_details(record):
    """
    Detail items shown under the exercise name.

    Returns:
        List of dicts with 'label' and 'value' keys (sets first, then reps)
    """
    return [
        {'label': 'Sets', 'value': format_sets(record)},
        {'label': reps_label(record), 'value': reps_value(record)},
    ]
