"""The header: title, save status, filters and error banner."""

from __future__ import annotations

from typing import Any

from jobtracker.data import JobStatus
from jobtracker.messages import (
    CancelEdit,
    ClearFilters,
    ErrorDismissed,
    FilterStatusChanged,
    LoadData,
    SaveData,
    SearchQueryChanged,
    ToggleForm,
)
from jobtracker.state import JobTracker
from jobtracker.theme import (
    BORDER,
    HEADER_BG,
    HIGHLIGHT,
    HIGHLIGHT_HOVER,
    HIGHLIGHT_SUBTLE,
    NEGATIVE,
    SECONDARY_TEXT,
    TEXT,
    WARNING,
    WARNING_SUBTLE,
    WHITE,
    Color,
    fade_color,
    with_alpha,
)
from jobtracker.ui.common import (
    Border,
    Button,
    ButtonStatus,
    ButtonStyle,
    Container,
    ContainerStyle,
    Column,
    PickList,
    PickListStyle,
    Row,
    Shadow,
    Space,
    Text,
    TextInput,
    TextStyle,
    delete_button_style,
    filter_section_style,
    input_style,
    secondary_button_style,
)

TITLE = "JOB TRACKER"

FILTER_OPTIONS = (
    JobStatus.ALL,
    JobStatus.APPLIED,
    JobStatus.OA,
    JobStatus.INTERVIEW,
    JobStatus.REJECTED,
    JobStatus.OFFER,
    JobStatus.ACCEPTED,
    JobStatus.WITHDRAWN,
)


def save_status_text(state: JobTracker) -> str:
    """Line describing whether the jobs have been saved."""
    if state.has_unsaved_changes:
        return "Unsaved changes"
    if state.last_saved is not None:
        return f"Last saved: {state.last_saved}"
    return "No changes"


def toggle_form_button_style(status: ButtonStatus) -> ButtonStyle:
    if status is ButtonStatus.HOVERED:
        return ButtonStyle(
            background=Color.from_rgb(0.14, 0.15, 0.17),
            text_color=HIGHLIGHT_HOVER,
            border=Border(color=HIGHLIGHT, width=1.0, radius=6.0),
            shadow=Shadow(Color.from_rgba(0.129, 0.737, 0.514, 0.1), (0.0, 1.0), 3.0),
        )
    return ButtonStyle(
        background=Color.from_rgb(0.11, 0.12, 0.14),
        text_color=HIGHLIGHT,
        border=Border(color=HIGHLIGHT_SUBTLE, width=1.0, radius=6.0),
        shadow=Shadow(),
    )


def editing_button_style(status: ButtonStatus) -> ButtonStyle:
    if status is ButtonStatus.HOVERED:
        return ButtonStyle(
            background=Color.from_rgb(0.18, 0.15, 0.12),
            text_color=WARNING,
            border=Border(color=WARNING, width=1.0, radius=6.0),
            shadow=Shadow(Color.from_rgba(0.945, 0.769, 0.059, 0.1), (0.0, 1.0), 3.0),
        )
    return ButtonStyle(
        background=Color.from_rgb(0.15, 0.13, 0.10),
        text_color=WARNING,
        border=Border(color=WARNING_SUBTLE, width=1.0, radius=6.0),
        shadow=Shadow(),
    )


def editing_action_button_style(status: ButtonStatus) -> ButtonStyle:
    """The prominent "Exit Edit Mode" button, built on the editing style."""
    base = editing_button_style(status)
    if status is ButtonStatus.HOVERED:
        return ButtonStyle(
            background=Color.from_rgb(0.22, 0.18, 0.12),
            text_color=WHITE,
            border=Border(color=WARNING, width=1.5, radius=6.0),
            shadow=Shadow(Color.from_rgba(0.945, 0.769, 0.059, 0.2), (0.0, 2.0), 4.0),
        )
    return ButtonStyle(
        background=Color.from_rgb(0.18, 0.15, 0.10),
        text_color=WHITE,
        border=Border(color=base.border.color, width=1.0, radius=6.0),
        shadow=base.shadow,
    )


def header_style() -> ContainerStyle:
    return ContainerStyle(
        background=HEADER_BG,
        text_color=TEXT,
        border=Border(color=BORDER, width=1.0, radius=0.0),
        shadow=Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.3), (0.0, 2.0), 8.0),
    )


def _top_row(state: JobTracker) -> Row:
    action: Button
    if state.editing_index is not None:
        action = Button(
            Text("Exit Edit Mode", size=14),
            on_press=CancelEdit(),
            style=editing_action_button_style,
            padding=(8.0, 15.0),
        )
    else:
        label = "Hide Form" if state.form.is_expanded else "Add New Job"
        action = Button(
            Text(label, size=14),
            on_press=ToggleForm(),
            style=toggle_form_button_style,
            padding=8.0,
        )
    count = Container(
        Text(f"{len(state.jobs)} APPLICATIONS", size=14, style=TextStyle(color=SECONDARY_TEXT)),
        padding=4.0,
    )
    return Row(
        children=[
            Text(TITLE, size=24, style=TextStyle(color=TEXT)),
            Space(width="fill"),
            action,
            Space(width=15.0),
            count,
        ],
        spacing=15,
        align_center=True,
        padding=(10.0, 20.0),
    )


def _status_row(state: JobTracker) -> Row:
    color = WARNING if state.has_unsaved_changes else SECONDARY_TEXT
    return Row(
        children=[
            Text(save_status_text(state), size=12, style=TextStyle(color=color)),
            Space(width="fill"),
            Button(Text("Save", size=14), on_press=SaveData(), style=secondary_button_style, padding=(8.0, 15.0)),
            Space(width=10.0),
            Button(Text("Reload", size=14), on_press=LoadData(), style=secondary_button_style, padding=(8.0, 15.0)),
        ],
        spacing=10,
        align_center=True,
        padding=(5.0, 20.0),
    )


def _filter_row(state: JobTracker) -> Row:
    editing = state.editing_index is not None
    label_color = with_alpha(SECONDARY_TEXT, 0.5) if editing else SECONDARY_TEXT
    alpha = 0.6 if editing else 1.0
    picker_style = PickListStyle(
        text_color=with_alpha(TEXT, alpha),
        placeholder_color=with_alpha(SECONDARY_TEXT, alpha),
        handle_color=with_alpha(SECONDARY_TEXT, alpha),
        background=with_alpha(Color.from_rgb(0.12, 0.14, 0.16), alpha),
        border=Border(color=with_alpha(BORDER, alpha), width=1.0, radius=4.0),
    )
    return Row(
        children=[
            Text("Filter:", size=14, style=TextStyle(color=label_color)),
            PickList(
                options=FILTER_OPTIONS,
                selected=state.filter_status,
                on_select=FilterStatusChanged,
                style=picker_style,
                padding=5.0,
            ),
            Space(width=15.0),
            TextInput(
                "Search jobs...",
                state.search_query,
                on_input=SearchQueryChanged,
                style=input_style(),
                padding=5.0,
                width=200.0,
            ),
            Space(width="fill"),
            Button(Text("Clear", size=14), on_press=ClearFilters(), style=secondary_button_style, padding=(6.0, 12.0)),
        ],
        spacing=10,
        align_center=True,
        padding=(10.0, 20.0),
    )


def _empty() -> Container:
    return Container(Space(height=0.0), width="fill")


def _error_display(state: JobTracker) -> Container:
    if state.error_message is None:
        return _empty()
    content = Row(
        children=[
            Text(state.error_message, size=12, style=TextStyle(color=NEGATIVE)),
            Space(width="fill"),
            Button(Text("✕", size=12), on_press=ErrorDismissed(), style=delete_button_style, padding=4.0),
        ],
        spacing=10,
        padding=(8.0, 20.0),
    )
    return Container(
        content,
        width="fill",
        style=ContainerStyle(
            background=Color.from_rgba(0.95, 0.27, 0.27, 0.1),
            border=Border(color=NEGATIVE, width=1.0, radius=0.0),
        ),
    )


def _editing_notification(state: JobTracker) -> Container:
    if state.editing_index is None:
        return _empty()
    return Container(
        Text(
            "Currently in edit mode - other actions are limited",
            size=12,
            style=TextStyle(color=fade_color(WARNING, 0.9)),
        ),
        width="fill",
        padding=(5.0, 20.0),
        style=ContainerStyle(
            background=Color.from_rgba(0.0, 0.0, 0.0, 0.3),
            border=Border(color=WARNING_SUBTLE, width=0.0, radius=0.0),
        ),
    )


def app_header(state: JobTracker) -> Container:
    """The full header for the current state."""
    sections: list[Any] = [
        _top_row(state),
        _status_row(state),
        _editing_notification(state),
        Container(_filter_row(state), width="fill", style=filter_section_style()),
        _error_display(state),
    ]
    return Container(
        Column(children=sections, spacing=8),
        width="fill",
        padding=5.0,
        style=header_style(),
    )