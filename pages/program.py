"""
Program page - the workout program grouped by day with Done toggles
"""

from functools import partial

import streamlit as st

from gym_board.design_system import get_day_header_html, get_exercise_card_html
from gym_board.program_grouping import group_by_day
from gym_board.program_loader import build_load_error_message, fetch_csv, load_program
from gym_board.program_view import CompletionTracker, build_program_view
from gym_board.ui_utils import (
    StatusBanner,
    empty_state,
    get_program_source,
    load_config,
    progress_bar,
    render_page_header,
)

RECORDS_KEY = 'program_records'
LOAD_FAILED_KEY = 'program_load_failed'


def reset_program(state):
    """Forget the loaded program, a remembered load failure and every Done mark."""
    state.pop(RECORDS_KEY, None)
    state.pop(LOAD_FAILED_KEY, None)
    CompletionTracker(state).reset()


def unique_button_key(exercise_id, used_keys):
    """Widget key for an exercise button; rows sharing an id get a numeric suffix."""
    key = f"done_btn_{exercise_id}"
    suffix = 1
    while key in used_keys:
        suffix += 1
        key = f"done_btn_{exercise_id}_{suffix}"
    used_keys.add(key)
    return key


def render_program(container, grouping, tracker):
    """
    Draw one card per day into container, in grouping order.

    Args:
        container: Streamlit container (or anything with markdown/button)
        grouping: Ordered dict of day -> sorted records
        tracker: CompletionTracker the Done buttons toggle
    """
    days = build_program_view(grouping, tracker)
    if not days:
        empty_state("😌", "No Exercises", "The program file has no exercise rows yet.", target=container)
        return

    used_keys = set()
    for day in days:
        container.markdown(get_day_header_html(day['day']), unsafe_allow_html=True)
        progress_bar(day['completed'], day['total'], target=container)

        for exercise in day['exercises']:
            container.markdown(get_exercise_card_html(exercise), unsafe_allow_html=True)
            container.button(
                exercise['button_label'],
                key=unique_button_key(exercise['id'], used_keys),
                on_click=tracker.toggle,
                args=(exercise['id'],),
                type="primary" if exercise['done'] else "secondary",
            )


def show():
    """Render the program page"""
    config = load_config()
    csv_file, url = get_program_source(config)
    error_message = build_load_error_message(csv_file)

    render_page_header(config['app']['title'], config['app']['subtitle'], "🏋️")

    # Banner slot must be created before the content slot to stay above it
    banner = StatusBanner(st.empty())
    content = st.empty()
    tracker = CompletionTracker(st.session_state)

    def render(grouping):
        render_program(content.container(), grouping, tracker)

    # A failed load stays failed until "Reload program" clears it
    if st.session_state.get(LOAD_FAILED_KEY):
        banner.set(error_message, "error")
        return

    records = st.session_state.get(RECORDS_KEY)
    if records is not None:
        render(group_by_day(records))
        return

    records = load_program(
        url,
        banner,
        render,
        fetch=partial(fetch_csv, timeout=config['program'].get('timeout')),
        error_message=error_message,
    )
    if records is None:
        content.empty()
        st.session_state[LOAD_FAILED_KEY] = True
        return

    st.session_state[RECORDS_KEY] = records
