"""
Parser for the gym program CSV export.
"""

import re

NEWLINE_RE = re.compile(r"\r\n?")


def normalize_lines(text):
    """Normalize CRLF/CR line endings, trim the text and split it into lines."""
    normalized = NEWLINE_RE.sub("\n", text or "").strip()
    if not normalized:
        return []
    return normalized.split("\n")


def split_header(line):
    """Header row is split on plain commas, quotes are not interpreted."""
    return line.split(",")


def split_quoted_line(line):
    """
    Split one data row into raw field values.

    A double quote toggles quoted mode and is dropped from the output.
    Commas only separate fields outside quoted mode.

    Args:
        line: A single CSV data line without its line terminator

    Returns:
        List of untrimmed field strings
    """
    values = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return values


def parse_csv(text):
    """
    Parse the program CSV into a list of records.

    Every header name is present in every record. Missing trailing values
    become empty strings and surplus values are dropped.

    Args:
        text: Full contents of the CSV file

    Returns:
        List of dicts mapping header name to trimmed string value
    """
    lines = normalize_lines(text)
    if not lines:
        return []

    headers = split_header(lines[0])
    records = []

    for line in lines[1:]:
        values = split_quoted_line(line)
        record = {}
        for index, header in enumerate(headers):
            value = values[index] if index < len(values) else ""
            record[header] = value.strip()
        records.append(record)

    return records
