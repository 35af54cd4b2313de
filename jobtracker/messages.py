"""Messages that drive state changes in the tracker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from jobtracker.data import JobStatus
from jobtracker.state import SortColumn


@dataclass(frozen=True)
class OpenUrl:
    url: str


@dataclass(frozen=True)
class ToggleForm:
    pass


@dataclass(frozen=True)
class CompanyChanged:
    value: str


@dataclass(frozen=True)
class PositionChanged:
    value: str


@dataclass(frozen=True)
class DateChanged:
    value: str


@dataclass(frozen=True)
class NotesChanged:
    value: str


@dataclass(frozen=True)
class UrlChanged:
    value: str


@dataclass(frozen=True)
class StatusSelected:
    status: JobStatus


@dataclass(frozen=True)
class AddJob:
    pass


@dataclass(frozen=True)
class ResetForm:
    pass


@dataclass(frozen=True)
class StartEditing:
    index: int


@dataclass(frozen=True)
class SaveEdit:
    pass


@dataclass(frozen=True)
class CancelEdit:
    pass


@dataclass(frozen=True)
class DeleteJob:
    index: int


@dataclass(frozen=True)
class SaveData:
    pass


@dataclass(frozen=True)
class LoadData:
    pass


@dataclass(frozen=True)
class ErrorDismissed:
    pass


@dataclass(frozen=True)
class SearchQueryChanged:
    query: str


@dataclass(frozen=True)
class FilterStatusChanged:
    status: JobStatus


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class SortBy:
    column: SortColumn


Message = Union[
    OpenUrl,
    ToggleForm,
    CompanyChanged,
    PositionChanged,
    DateChanged,
    NotesChanged,
    UrlChanged,
    StatusSelected,
    AddJob,
    ResetForm,
    StartEditing,
    SaveEdit,
    CancelEdit,
    DeleteJob,
    SaveData,
    LoadData,
    ErrorDismissed,
    SearchQueryChanged,
    FilterStatusChanged,
    ClearFilters,
    SortBy,
]