#!/usr/bin/env python3
"""
Gym Program Board - Streamlit Web Interface
Main entry point for the web application.
"""

import streamlit as st
import os
import sys
import importlib

# Ensure pages directory is in Python path
sys.path.insert(0, os.path.dirname(__file__))

# Only reload modules in development mode (set DEV_MODE=1 in environment)
DEV_MODE = os.environ.get('DEV_MODE', '0') == '1'

try:
    import pages

    program = importlib.import_module('pages.program')

    if DEV_MODE:
        importlib.reload(program)
except ImportError as e:
    st.error(f"Critical error loading pages: {e}")
    st.code(f"Python path: {sys.path}")
    st.code(f"Current directory: {os.getcwd()}")
    st.stop()

from gym_board.ui_utils import get_program_source, load_config

# Configure the page
st.set_page_config(
    page_title="🏋️ Gym Program",
    page_icon="🏋️",
    layout="centered",
    initial_sidebar_state="collapsed"
)

st.markdown("""
    <style>
    /* Page header styles */
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        margin-bottom: 0.5rem;
        font-family: 'Space Grotesk', sans-serif;
    }

    .sub-header {
        font-size: 1.125rem;
        color: #6E6E73;
        margin-bottom: 2rem;
    }

    /* Mobile responsive styles */
    @media (max-width: 768px) {
        .main-header {
            font-size: 1.75rem;
        }

        .sub-header {
            font-size: 1rem;
        }

        /* Full width buttons on mobile */
        .stButton button {
            width: 100% !important;
        }

        .main .block-container {
            padding-left: 1rem;
            padding-right: 1rem;
        }
    }
    </style>
""", unsafe_allow_html=True)

# Sidebar
with st.sidebar:
    st.markdown("# 🏋️ Gym Program")
    st.markdown("---")

    if st.button("🔄 Reload program", use_container_width=True, key="reload_program"):
        program.reset_program(st.session_state)
        st.rerun()

    csv_file, program_url = get_program_source(load_config())
    st.markdown(f"**Source:** `{program_url}`")

    st.markdown("---")
    with st.expander("💡 Quick Tips"):
        st.markdown(f"""
        - Tap **Done** after each exercise, tap again to undo
        - Done marks last until you reload the program
        - `{csv_file}` is served from the `static/` folder next to `app.py`
        """)

program.show()
