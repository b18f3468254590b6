"""
Fetches the program CSV and drives the fetch -> parse -> render sequence.
"""

import traceback
from urllib.parse import urljoin

import requests

from gym_board.csv_parser import parse_csv
from gym_board.program_grouping import group_by_day

LOADING_MESSAGE = "Loading program…"
NO_CACHE_HEADERS = {
    'Cache-Control': 'no-cache',
    'Pragma': 'no-cache',
}


class LoadError(Exception):
    """The program file could not be retrieved."""

    def __init__(self, resource, status, status_text):
        self.resource = resource
        self.status = status
        self.status_text = status_text
        super().__init__(f"Failed to load {resource}: {status} {status_text}")


def build_load_error_message(csv_file="gym.csv"):
    """Remediation text shown when the program cannot be loaded."""
    return (
        f"Could not load {csv_file}. The file is read over http:// from the same "
        "server as this page, so opening it straight from the local filesystem will not work. "
        f"Keep {csv_file} in the <code>static/</code> folder and start the app from the "
        "project folder with <code>streamlit run app.py</code> (static serving is enabled in "
        "<code>.streamlit/config.toml</code>). To serve it separately instead, run "
        f"<code>python3 -m http.server 8000</code> in the folder that holds {csv_file} and set "
        "<code>program.base_url</code> in config.yaml to <code>http://localhost:8000/</code>."
    )


LOAD_ERROR_MESSAGE = build_load_error_message()


def build_program_url(base_url, csv_file):
    """Resolve the CSV file name relative to the configured base URL."""
    if base_url and not base_url.endswith("/"):
        base_url = base_url + "/"
    return urljoin(base_url, csv_file)


def fetch_csv(url, session=None, timeout=None):
    """
    Download the program CSV, bypassing HTTP caches.

    Args:
        url: Absolute URL of the CSV file
        session: Optional requests.Session (module-level requests otherwise)
        timeout: Optional request timeout in seconds; None waits indefinitely

    Returns:
        Response body as text

    Raises:
        LoadError: on a transport failure or a non-2xx response
    """
    http = session or requests
    try:
        response = http.get(url, headers=NO_CACHE_HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        raise LoadError(url, 0, str(exc)) from exc

    if not 200 <= response.status_code < 300:
        raise LoadError(url, response.status_code, response.reason or "")

    return response.text


def load_program(url, banner, render, fetch=fetch_csv, error_message=LOAD_ERROR_MESSAGE):
    """
    Run the full load sequence once.

    Args:
        url: Location of the program CSV
        banner: Status banner with a set(message, severity='info') method
        render: Callable receiving the day grouping; clears its own container
        fetch: Callable returning the CSV text for a URL
        error_message: Banner text shown when anything fails

    Returns:
        List of parsed records, or None when loading failed
    """
    try:
        banner.set(LOADING_MESSAGE)
        csv_text = fetch(url)
        records = parse_csv(csv_text)
        banner.set("")
        grouping = group_by_day(records)
        render(grouping)
    except Exception as e:
        print(f"❌ Error loading program from {url}: {e}")
        traceback.print_exc()
        banner.set(error_message, "error")
        return None

    print(f"✓ Loaded {len(records)} exercises across {len(grouping)} days")
    return records
