"""The whole window's content for a given state."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from jobtracker.data import JobApplication, JobStatus
from jobtracker.messages import ClearFilters
from jobtracker.state import JobTracker
from jobtracker.theme import BORDER, SECONDARY_TEXT
from jobtracker.ui.common import (
    Button,
    Column,
    Container,
    Row,
    Rule,
    Space,
    Text,
    TextStyle,
    main_background,
    secondary_button_style,
)
from jobtracker.ui.form import add_form, edit_form
from jobtracker.ui.header import app_header
from jobtracker.ui.job_row import job_row, table_header


def status_counts(jobs: Iterable[JobApplication]) -> Counter[JobStatus]:
    """Number of jobs in each status."""
    return Counter(job.status for job in jobs)


def _muted(content: str, size: int = 12) -> Text:
    return Text(content, size=size, style=TextStyle(color=SECONDARY_TEXT))


def view(state: JobTracker) -> Container:
    """Build the widget tree for ``state``."""
    shown = state.sorted_jobs()

    rows = Column(
        children=[
            edit_form(index, state.edit_form) if state.editing_index == index else job_row(index, job)
            for index, job in shown
        ],
        spacing=12,
    )

    counts = status_counts(state.jobs)
    stats_row = Row(
        children=[
            _muted(f"Applied: {counts[JobStatus.APPLIED]}"),
            _muted(f"Rejected: {counts[JobStatus.REJECTED]}"),
            _muted(f"Offers: {counts[JobStatus.OFFER]}"),
            Space(width="fill"),
            _muted(f"Showing {len(shown)} of {len(state.jobs)} applications"),
        ],
        spacing=15,
        padding=10.0,
    )

    jobs_content: Column
    if not shown and state.jobs:
        jobs_content = Column(
            children=[
                Space(height=30.0),
                _muted("No applications match your filters", size=16),
                Space(height=10.0),
                Button(
                    Text("Clear Filters", size=14),
                    on_press=ClearFilters(),
                    style=secondary_button_style,
                    padding=(8.0, 15.0),
                ),
            ],
            spacing=10,
            align_center=True,
            width="fill",
        )
    else:
        jobs_content = Column(
            children=[table_header(state.sort_column, state.sort_order), rows, Space(height=20.0)],
            spacing=15,
        )

    form: Any = add_form(state) if state.editing_index is None else Container(Space(height=0.0), width="fill")
    content = Column(
        children=[
            app_header(state),
            Rule(thickness=1, color=BORDER),
            form,
            Container(Column(children=[stats_row, jobs_content], spacing=15), padding=20.0, width="fill"),
        ]
    )
    return Container(content, width="fill", height="fill", style=main_background())