"""
View model for the program page and per-exercise completion state.

build_program_view is a pure mapping from grouped records to plain dicts;
the Streamlit page turns those dicts into markup and buttons.
"""

from gym_board.exercise_formatter import (
    build_exercise_id,
    format_exercise_details,
    get_video_links,
    is_warmup,
)

COMPLETED_KEY = "completed_exercises"
PENDING_LABEL = "Done"
COMPLETED_LABEL = "✓ Done!"


class CompletionTracker:
    """Tracks which exercises are marked done for the current session."""

    def __init__(self, state, key=COMPLETED_KEY):
        """
        Args:
            state: Mutable mapping holding the completed id set
                (st.session_state in the app, a dict in tests)
            key: Mapping key the set is stored under
        """
        self.state = state
        self.key = key
        if self.key not in self.state:
            self.state[self.key] = set()

    @property
    def completed(self):
        return self.state[self.key]

    def is_done(self, exercise_id):
        return exercise_id in self.completed

    def toggle(self, exercise_id):
        """Flip pending <-> completed. Returns True when now completed."""
        if exercise_id in self.completed:
            self.completed.discard(exercise_id)
            return False
        self.completed.add(exercise_id)
        return True

    def button_label(self, exercise_id):
        return COMPLETED_LABEL if self.is_done(exercise_id) else PENDING_LABEL

    def reset(self):
        self.state[self.key] = set()


def build_exercise_view(day, record, tracker):
    exercise_id = build_exercise_id(day, record)
    return {
        'id': exercise_id,
        'name': record.get('activity', ''),
        'warmup': is_warmup(record),
        'details': format_exercise_details(record),
        'videos': get_video_links(record),
        'done': tracker.is_done(exercise_id),
        'button_label': tracker.button_label(exercise_id),
    }


def build_program_view(grouping, tracker):
    """
    Map grouped records to the day cards shown on the page.

    Args:
        grouping: Ordered dict of day -> sorted records (see group_by_day)
        tracker: CompletionTracker for done flags and button labels

    Returns:
        List of day dicts in grouping order, each with 'day', 'exercises',
        'completed' and 'total'
    """
    days = []
    for day, records in grouping.items():
        exercises = [build_exercise_view(day, record, tracker) for record in records]
        days.append({
            'day': day,
            'exercises': exercises,
            'completed': count_completed(exercises),
            'total': len(exercises),
        })
    return days


def count_completed(exercises):
    return sum(1 for exercise in exercises if exercise['done'])
