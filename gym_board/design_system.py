"""
Design system constants and markup builders for the program page.
Apple-inspired neutral palette, minimal motion, mobile-first.
"""

import html

# Color tokens
COLORS = {
    'primary': '#111111',
    'accent': '#0071E3',
    'background': '#F5F5F7',
    'surface': '#FFFFFF',
    'success': '#34C759',
    'success_surface': '#EAF8EE',
    'warning': '#FF9F0A',
    'warning_surface': '#FFF4E5',
    'text_primary': '#111111',
    'text_secondary': '#6E6E73',
    'border_medium': '#D2D2D7',
    'border_light': '#E5E5EA',
}

# Banner palette per severity: (background, text)
BANNER_COLORS = {
    'info': ('#EEF2FF', '#3730A3'),
    'error': ('#FFE6E6', '#991B1B'),
}


def get_status_banner_html(message, severity="info"):
    """
    Single status banner shown above the program.

    The message may contain inline markup (e.g. <code>) and is not escaped.
    Unknown severities fall back to info styling.
    """
    background, text_color = BANNER_COLORS.get(severity, BANNER_COLORS['info'])
    return f"""<div id="status-banner" class="status-banner {html.escape(severity)}" style="
        margin: 0 0 1rem 0;
        padding: 0.75rem 1rem;
        border-radius: 12px;
        font-weight: 600;
        box-shadow: 0 1px 2px rgba(0,0,0,0.06);
        background: {background};
        color: {text_color};
    ">{message}</div>""".strip()


def get_empty_state_html(icon, title, description, color_scheme=None):
    """Centered placeholder card; title and description are escaped."""
    if color_scheme is None:
        color_scheme = COLORS

    icon_html = f'<div style="font-size: 3rem; margin-bottom: 1rem;">{icon}</div>' if icon else ""

    return f"""<div class="empty-state" style="
        text-align: center;
        padding: 3rem 2rem;
        background: {color_scheme['surface']};
        border: 1px solid {color_scheme['border_medium']};
        border-radius: 16px;
        margin: 2rem 0;
    ">{icon_html}
        <div style="font-size: 1.25rem; font-weight: 600; margin-bottom: 0.5rem; color: {color_scheme['text_primary']};">{html.escape(title)}</div>
        <div style="color: {color_scheme['text_secondary']}; line-height: 1.5;">{html.escape(description)}</div>
    </div>""".strip()


def get_progress_bar_html(completed, total, color_scheme=None):
    """
    Day completion bar: 'x / y done' with the fill turning green once every
    exercise of the day is marked done.
    """
    if color_scheme is None:
        color_scheme = COLORS

    percentage = round(completed / total * 100) if total > 0 else 0
    fill = color_scheme['success'] if total and completed == total else color_scheme['accent']

    return f"""<div class="day-progress" style="margin: 0.5rem 0 1rem 0;">
        <div style="display: flex; justify-content: space-between; font-size: 0.875rem; font-weight: 600; margin-bottom: 0.35rem;">
            <span style="color: {color_scheme['text_primary']};">{completed} / {total} done</span>
            <span style="color: {fill};">{percentage}%</span>
        </div>
        <div style="width: 100%; height: 8px; background: {color_scheme['border_light']}; border-radius: 4px; overflow: hidden;">
            <div style="width: {percentage}%; height: 100%; background: {fill}; transition: width 180ms ease-out;"></div>
        </div>
    </div>""".strip()


def get_day_header_html(day, color_scheme=None):
    """Title row opening a day card."""
    if color_scheme is None:
        color_scheme = COLORS

    return f"""<div class="day-header" style="
        display: flex;
        align-items: center;
        gap: 0.75rem;
        margin: 1.5rem 0 0.5rem 0;
    ">
        <div class="day-icon" style="
            width: 12px;
            height: 12px;
            border-radius: 50%;
            background: {color_scheme['accent']};
        "></div>
        <h2 class="day-title" style="margin: 0; color: {color_scheme['text_primary']};">{html.escape(day)}</h2>
    </div>""".strip()


def get_warmup_badge_html(color_scheme=None):
    if color_scheme is None:
        color_scheme = COLORS
    return (
        f'<span class="warmup-badge" style="margin-left: 0.5rem; padding: 0.1rem 0.5rem; '
        f'border-radius: 999px; font-size: 0.7rem; font-weight: 700; text-transform: uppercase; '
        f'background: {color_scheme["warning_surface"]}; color: {color_scheme["warning"]};">Warmup</span>'
    )


def get_detail_item_html(label, value, color_scheme=None):
    if color_scheme is None:
        color_scheme = COLORS
    return f"""<div class="detail-item" style="
            border: 1px solid {color_scheme['border_medium']};
            padding: 0.5rem;
            border-radius: 8px;
        ">
            <span class="detail-label" style="font-size: 0.7rem; color: {color_scheme['text_secondary']}; font-weight: 700; text-transform: uppercase;">{html.escape(label)}:</span>
            <span class="detail-value" style="font-weight: 700; color: {color_scheme['text_primary']};">{html.escape(value)}</span>
        </div>"""


def get_video_links_html(videos, color_scheme=None):
    """
    Numbered instruction video links opening in a new tab.

    Returns an empty string when there are no videos so no container is drawn.
    """
    if not videos:
        return ""
    if color_scheme is None:
        color_scheme = COLORS

    links = "".join(
        f'<a href="{html.escape(url, quote=True)}" target="_blank" rel="noopener" class="video-link" '
        f'style="margin-right: 0.75rem; color: {color_scheme["accent"]}; font-weight: 600;">{html.escape(label)}</a>'
        for label, url in videos
    )
    return f'<div class="video-links" style="margin-top: 0.75rem;">{links}</div>'


def get_exercise_card_html(exercise, color_scheme=None):
    """
    Card for one exercise from build_program_view.

    Completed exercises are faded with a success border; warmups get a badge
    and a 'warmup' class.
    """
    if color_scheme is None:
        color_scheme = COLORS

    classes = ["exercise"]
    if exercise['warmup']:
        classes.append("warmup")
    if exercise['done']:
        classes.append("done")

    border_color = color_scheme['success'] if exercise['done'] else color_scheme['border_medium']
    background = color_scheme['success_surface'] if exercise['done'] else color_scheme['surface']
    opacity = "0.7" if exercise['done'] else "1"
    name_decoration = "line-through" if exercise['done'] else "none"
    warmup_badge = get_warmup_badge_html(color_scheme) if exercise['warmup'] else ""

    details_html = "".join(
        get_detail_item_html(detail['label'], detail['value'], color_scheme)
        for detail in exercise['details']
    )

    return f"""<div class="{' '.join(classes)}" data-exercise-id="{html.escape(exercise['id'], quote=True)}" style="
        background: {background};
        border: 1px solid {border_color};
        border-radius: 10px;
        padding: 1rem;
        margin-bottom: 0.5rem;
        opacity: {opacity};
        transition: opacity 120ms ease-out, border-color 120ms ease-out;
    ">
        <div class="exercise-name" style="font-size: 1.1rem; font-weight: 700; color: {color_scheme['text_primary']}; text-decoration: {name_decoration};">
            {html.escape(exercise['name'])}{warmup_badge}
        </div>
        <div class="exercise-details" style="margin-top: 0.75rem; display: grid; grid-template-columns: repeat(2, 1fr); gap: 0.5rem;">
            {details_html}
        </div>{get_video_links_html(exercise['videos'], color_scheme)}
    </div>""".strip()
