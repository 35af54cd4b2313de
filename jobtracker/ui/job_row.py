"""A job's row in the list and the list's column header."""

from __future__ import annotations

from typing import Any

from jobtracker.data import JobApplication, JobStatus
from jobtracker.messages import OpenUrl, SortBy, StartEditing
from jobtracker.state import SortColumn, SortOrder
from jobtracker.theme import SECONDARY_TEXT, TEXT, WHITE
from jobtracker.ui.common import (
    Border,
    Button,
    ButtonStyle,
    Container,
    Row,
    Shadow,
    Text,
    TextStyle,
    card_style,
    company_text_style,
    edit_button_style,
    link_button_style,
    position_text_style,
    status_badge_style,
    table_header_style,
)

_NEUTRAL = "⋮"


def sort_indicator(column: SortColumn, sort_column: SortColumn, sort_order: SortOrder) -> str:
    """Arrow shown next to a sortable column heading."""
    if column is not sort_column:
        return _NEUTRAL
    if sort_order is SortOrder.ASCENDING:
        return "▲"
    if sort_order is SortOrder.DESCENDING:
        return "▼"
    return _NEUTRAL


def _closed(status: JobStatus) -> bool:
    return status in (JobStatus.REJECTED, JobStatus.WITHDRAWN)


def job_row(index: int, job: JobApplication) -> Container:
    """A card showing one application, with its position linked when it has a URL."""
    status = job.status
    badge = Container(
        Text(str(status), size=13, style=TextStyle(color=WHITE), width="fill", centered=True),
        padding=(6.0, 12.0),
        style=status_badge_style(status),
        fill_portion=1,
    )
    actions = Row(
        children=[
            Button(
                Text("Edit", size=13),
                on_press=StartEditing(index),
                style=edit_button_style,
                padding=(5.0, 10.0),
            )
        ],
        spacing=8,
        align_center=True,
        fill_portion=1,
    )
    company = Text(job.company, size=14, fill_portion=2, style=company_text_style(status))
    date = Text(job.date_applied, size=14, fill_portion=2, style=TextStyle(color=SECONDARY_TEXT))

    position: Any
    if job.url is not None:
        position = Button(
            Text(job.position, size=14),
            on_press=OpenUrl(job.url),
            style=link_button_style,
            padding=(5.0, 10.0),
            fill_portion=3,
        )
        notes_color = TEXT
    else:
        position = Text(job.position, size=14, fill_portion=3, style=position_text_style(status))
        notes_color = SECONDARY_TEXT if _closed(status) else TEXT
    notes = Text(job.notes, size=14, fill_portion=4, style=TextStyle(color=notes_color))

    content = Row(
        children=[company, position, date, badge, notes, actions],
        spacing=15,
        align_center=True,
        padding=18.0,
    )
    return Container(content, style=card_style(status), width="fill")


def _header_button_style(status: Any = None) -> ButtonStyle:
    return ButtonStyle(background=None, text_color=SECONDARY_TEXT, border=Border(), shadow=Shadow())


def _sortable(label: str, column: SortColumn, sort_column: SortColumn, sort_order: SortOrder) -> Button:
    heading = Row(
        children=[
            Text(label, size=13),
            Text(sort_indicator(column, sort_column, sort_order), size=9),
        ],
        spacing=5,
    )
    return Button(heading, on_press=SortBy(column), style=_header_button_style, fill_portion=2)


def _heading(label: str, portion: int) -> Text:
    return Text(label, size=13, fill_portion=portion, style=TextStyle(color=SECONDARY_TEXT))


def table_header(sort_column: SortColumn, sort_order: SortOrder) -> Container:
    """Column headings; company and date headings toggle sorting."""
    content = Row(
        children=[
            _sortable("COMPANY", SortColumn.COMPANY, sort_column, sort_order),
            _heading("POSITION", 3),
            _sortable("APPLIED", SortColumn.DATE_APPLIED, sort_column, sort_order),
            _heading("STATUS", 1),
            _heading("NOTES", 4),
            _heading("ACTIONS", 1),
        ],
        spacing=15,
        padding=15.0,
    )
    return Container(content, style=table_header_style(), width="fill")