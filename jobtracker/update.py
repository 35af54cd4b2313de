"""Applying messages to the tracker state."""

from __future__ import annotations

import sys

from jobtracker import storage
from jobtracker.messages import (
    AddJob,
    CancelEdit,
    ClearFilters,
    CompanyChanged,
    DateChanged,
    DeleteJob,
    ErrorDismissed,
    FilterStatusChanged,
    LoadData,
    Message,
    NotesChanged,
    OpenUrl,
    PositionChanged,
    ResetForm,
    SaveData,
    SaveEdit,
    SearchQueryChanged,
    SortBy,
    StartEditing,
    StatusSelected,
    ToggleForm,
    UrlChanged,
)
from jobtracker.state import FormState, JobTracker, SortOrder, timestamp

_NEXT_ORDER = {
    SortOrder.ASCENDING: SortOrder.DESCENDING,
    SortOrder.DESCENDING: SortOrder.NONE,
    SortOrder.NONE: SortOrder.ASCENDING,
}


def _open_url(url: str) -> bool:
    """Show the link so the user can follow it; an empty link cannot be opened."""
    if not url.strip():
        return False
    print(f"Open in a browser: {url}")
    return True


def _set_form_field(state: JobTracker, name: str, value: object) -> None:
    """Write a field of the edit form while editing, otherwise of the add form."""
    if state.editing_index is not None:
        setattr(state.edit_form, name, value)
        state.has_unsaved_changes = True
    else:
        setattr(state.form, name, value)


def _stop_editing(state: JobTracker) -> None:
    state.editing_index = None
    state.edit_form = FormState()


def _delete_job(state: JobTracker, index: int) -> None:
    if not 0 <= index < len(state.jobs):
        return
    try:
        storage.backup_data(state.data_path)
    except storage.StorageError:
        pass
    del state.jobs[index]
    state.has_unsaved_changes = True
    if state.editing_index == index:
        _stop_editing(state)
    elif state.editing_index is not None and state.editing_index > index:
        state.editing_index -= 1
    state.save()


def _save_edit(state: JobTracker) -> None:
    index = state.editing_index
    if index is None:
        return
    if 0 <= index < len(state.jobs) and state.edit_form.is_valid():
        job = state.edit_form.to_job()
        if job is not None:
            job.last_updated = timestamp()
            state.jobs[index] = job
            state.has_unsaved_changes = True
            state.save()
    _stop_editing(state)


def _add_job(state: JobTracker) -> None:
    if not state.form.is_valid():
        return
    job = state.form.to_job()
    if job is not None:
        job.last_updated = timestamp()
        state.jobs.append(job)
        state.has_unsaved_changes = True
        state.save()
    state.form = FormState(is_expanded=True)


def _load(state: JobTracker) -> None:
    try:
        jobs = storage.load_jobs(state.data_path)
    except storage.StorageError as err:
        state.error_message = f"Error loading data: {err}"
    else:
        state.jobs = jobs
        state.error_message = None
        state.has_unsaved_changes = False


def update(state: JobTracker, message: Message) -> None:
    """Apply ``message`` to ``state`` in place."""
    match message:
        case OpenUrl(url):
            if not _open_url(url):
                print(f"Failed to open URL: {url}", file=sys.stderr)
        case ToggleForm():
            state.form.is_expanded = not state.form.is_expanded
        case CompanyChanged(value):
            _set_form_field(state, "company", value)
        case PositionChanged(value):
            _set_form_field(state, "position", value)
        case DateChanged(value):
            _set_form_field(state, "date_applied", value)
        case NotesChanged(value):
            _set_form_field(state, "notes", value)
        case UrlChanged(value):
            _set_form_field(state, "url", value)
        case StatusSelected(status):
            _set_form_field(state, "status", status)
        case AddJob():
            _add_job(state)
        case ResetForm():
            state.form = FormState(is_expanded=True)
        case StartEditing(index):
            if 0 <= index < len(state.jobs):
                state.edit_form = FormState.from_job(state.jobs[index])
                state.editing_index = index
        case SaveEdit():
            _save_edit(state)
        case CancelEdit():
            _stop_editing(state)
        case DeleteJob(index):
            _delete_job(state, index)
        case SaveData():
            state.save()
        case LoadData():
            _load(state)
        case ErrorDismissed():
            state.error_message = None
        case SearchQueryChanged(query):
            state.search_query = query
        case FilterStatusChanged(status):
            state.filter_status = status
        case ClearFilters():
            state.search_query = ""
            state.filter_status = None
        case SortBy(column):
            if state.sort_column == column:
                state.sort_order = _NEXT_ORDER[state.sort_order]
            else:
                state.sort_column = column
                state.sort_order = SortOrder.ASCENDING
        case _:
            raise TypeError(f"unknown message: {message!r}")