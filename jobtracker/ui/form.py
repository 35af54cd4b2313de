"""The add-application and edit-application forms."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable

from jobtracker.data import JobStatus
from jobtracker.messages import (
    AddJob,
    CancelEdit,
    CompanyChanged,
    DateChanged,
    DeleteJob,
    NotesChanged,
    PositionChanged,
    ResetForm,
    SaveEdit,
    StatusSelected,
    UrlChanged,
)
from jobtracker.state import FormState, JobTracker
from jobtracker.theme import BORDER, SECONDARY_TEXT, TEXT, WARNING, Color
from jobtracker.ui.common import (
    Border,
    Button,
    Column,
    Container,
    ContainerStyle,
    PickList,
    PickListStyle,
    Row,
    Shadow,
    Space,
    Text,
    TextInput,
    TextStyle,
    delete_button_style,
    input_style,
    primary_button_style,
    save_button_style,
    secondary_button_style,
)

STATUS_OPTIONS = (
    JobStatus.APPLIED,
    JobStatus.OA,
    JobStatus.INTERVIEW,
    JobStatus.REJECTED,
    JobStatus.OFFER,
    JobStatus.ACCEPTED,
    JobStatus.WITHDRAWN,
)

_BUTTON_PADDING = (10.0, 20.0)


def pick_list_style(status: Any = None) -> PickListStyle:
    """Status picker look; the same in every interaction state."""
    return PickListStyle(
        text_color=TEXT,
        placeholder_color=SECONDARY_TEXT,
        handle_color=SECONDARY_TEXT,
        background=Color.from_rgb(0.12, 0.14, 0.16),
        border=Border(color=BORDER, width=1.0, radius=6.0),
    )


def form_style() -> ContainerStyle:
    return ContainerStyle(
        background=Color.from_rgb(0.09, 0.10, 0.12),
        text_color=TEXT,
        border=Border(color=BORDER, width=1.0, radius=8.0),
        shadow=Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.3), (0.0, 3.0), 10.0),
    )


def edit_form_style() -> ContainerStyle:
    """The form look with a warning-coloured outline."""
    style = form_style()
    return replace(style, border=replace(style.border, color=WARNING, width=1.5))


def _label(content: str) -> Text:
    return Text(content, size=12, style=TextStyle(color=SECONDARY_TEXT))


def _field(label: str, widget: Any, half: bool = False) -> Column:
    return Column(
        children=[_label(label), widget],
        spacing=5,
        width="fill" if half else None,
        fill_portion=1 if half else None,
    )


def _input(placeholder: str, value: str, on_input: Callable[[str], Any]) -> TextInput:
    return TextInput(placeholder, value, on_input=on_input, style=input_style(), padding=8)


def _fields(form: FormState) -> list[Any]:
    """The four rows of inputs shared by both forms."""
    status_picker = PickList(
        options=STATUS_OPTIONS,
        selected=form.status,
        on_select=StatusSelected,
        style=pick_list_style(),
        padding=8,
    )
    return [
        Row(
            children=[
                _field("Company", _input("Company name", form.company, CompanyChanged), half=True),
                _field("Position", _input("Job title", form.position, PositionChanged), half=True),
            ],
            spacing=15,
        ),
        Row(
            children=[
                _field("Date Applied", _input("YYYY-MM-DD", form.date_applied, DateChanged), half=True),
                _field("Status", status_picker, half=True),
            ],
            spacing=15,
        ),
        _field("Notes", _input("Additional notes about the application", form.notes, NotesChanged)),
        _field("URL (Optional)", _input("https://...", form.url, UrlChanged)),
    ]


def _action(label: str, message: Any, style: Callable) -> Button:
    return Button(Text(label, size=14), on_press=message, style=style, padding=_BUTTON_PADDING)


def add_form(state: JobTracker) -> Container:
    """The add form, or an empty placeholder when collapsed or editing."""
    if not state.form.is_expanded or state.editing_index is not None:
        return Container(Space(height=0), width="fill")

    buttons = Row(
        children=[
            Space(width="fill"),
            _action("Reset", ResetForm(), secondary_button_style),
            _action("Add Application", AddJob(), primary_button_style),
        ],
        spacing=10,
    )
    content = Column(
        children=[
            Text("Add New Application", size=18, style=TextStyle(color=TEXT)),
            *_fields(state.form),
            buttons,
        ],
        spacing=15,
        padding=20,
    )
    return Container(content, style=form_style(), width="fill")


def edit_form(index: int, form: FormState) -> Container:
    """The inline form for editing the job at ``index``."""
    buttons = Row(
        children=[
            _action("Delete", DeleteJob(index), delete_button_style),
            Space(width="fill"),
            _action("Cancel", CancelEdit(), secondary_button_style),
            _action("Save Changes", SaveEdit(), save_button_style),
        ],
        spacing=10,
    )
    content = Column(
        children=[
            Text(f"Edit Application: {form.company}", size=16, style=TextStyle(color=WARNING)),
            *_fields(form),
            buttons,
        ],
        spacing=15,
        padding=20,
    )
    return Container(content, style=edit_form_style(), width="fill")