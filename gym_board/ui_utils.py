"""
UI utility functions and configuration helpers shared by the app pages.
"""

import html
import os
import posixpath

import streamlit as st
import yaml
from dotenv import load_dotenv

from gym_board.design_system import (
    get_empty_state_html,
    get_progress_bar_html,
    get_status_banner_html,
)
from gym_board.program_loader import build_program_url

DEFAULT_CONFIG = {
    'program': {
        # Empty base_url means the Streamlit server serving this page
        'base_url': '',
        'csv_path': 'app/static/gym.csv',
        'timeout': None,
    },
    'app': {
        'title': 'Gym Program',
        'subtitle': 'Tap Done as you finish each exercise',
    },
}


def load_config(path='config.yaml'):
    """
    Load config.yaml merged over the defaults.

    A missing or unreadable file falls back to DEFAULT_CONFIG.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        loaded = {}

    config = {}
    for section, defaults in DEFAULT_CONFIG.items():
        config[section] = {**defaults, **(loaded.get(section) or {})}
    return config


def get_app_base_url():
    """Root URL of the Streamlit server this page is served from."""
    port = st.get_option('server.port')
    base_path = (st.get_option('server.baseUrlPath') or '').strip('/')
    root = f"http://localhost:{port}/"
    return f"{root}{base_path}/" if base_path else root


def get_program_source(config):
    """
    Resolve where the program CSV lives.

    By default the file is read from the app's own static folder
    (static/gym.csv served at app/static/gym.csv). GYM_PROGRAM_BASE_URL /
    GYM_PROGRAM_CSV (environment or .env) override config.yaml.

    Returns:
        Tuple of (csv file name, absolute URL)
    """
    load_dotenv()
    program = config.get('program', {}) or {}
    base_url = os.getenv('GYM_PROGRAM_BASE_URL') or program.get('base_url') or get_app_base_url()
    csv_path = os.getenv('GYM_PROGRAM_CSV') or program.get('csv_path') or 'app/static/gym.csv'
    return posixpath.basename(csv_path), build_program_url(base_url, csv_path)


class StatusBanner:
    """Owns the single status banner slot above the program content."""

    def __init__(self, placeholder):
        """
        Args:
            placeholder: st.empty() slot created right before the content
                container so the banner always sits above it
        """
        self.placeholder = placeholder

    def set(self, message, severity="info"):
        """Replace the current banner; an empty message removes it."""
        if not message:
            self.clear()
            return
        self.placeholder.markdown(
            get_status_banner_html(message, severity),
            unsafe_allow_html=True
        )

    def clear(self):
        self.placeholder.empty()


def render_page_header(title, subtitle=None, title_icon=""):
    """
    Page title with an optional subtitle line; both are escaped.

    Args:
        title: Main page title
        subtitle: Optional subtitle text
        title_icon: Optional emoji/icon before title
    """
    icon_text = f"{title_icon} " if title_icon else ""
    st.markdown(
        f'<div class="main-header">{icon_text}{html.escape(str(title))}</div>',
        unsafe_allow_html=True
    )
    if subtitle:
        st.markdown(
            f'<div class="sub-header">{html.escape(str(subtitle))}</div>',
            unsafe_allow_html=True
        )


def empty_state(icon, title, description, target=st):
    """Placeholder card drawn into target when there is nothing to show."""
    target.markdown(get_empty_state_html(icon, title, description), unsafe_allow_html=True)


def progress_bar(completed, total, target=st):
    """Per-day 'x / y done' bar drawn into target."""
    target.markdown(get_progress_bar_html(completed, total), unsafe_allow_html=True)
