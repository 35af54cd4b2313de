"""Application state: the job list, forms, filters and sorting."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from jobtracker import storage
from jobtracker.data import JobApplication, JobStatus

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def timestamp() -> str:
    """Return the current local time formatted for display and storage."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass
class FormState:
    """Contents of the add or edit form."""

    company: str = ""
    position: str = ""
    date_applied: str = ""
    notes: str = ""
    url: str = ""
    status: JobStatus | None = None
    is_expanded: bool = False

    def is_valid(self) -> bool:
        """True when every required field is filled in."""
        return bool(self.company and self.position and self.date_applied) and self.status is not None

    def to_job(self) -> JobApplication | None:
        """Build an application from the form, or None if it is incomplete."""
        if not self.is_valid():
            return None
        assert self.status is not None
        return JobApplication(
            company=self.company,
            position=self.position,
            date_applied=self.date_applied,
            status=self.status,
            notes=self.notes,
            url=self.url or None,
            last_updated=timestamp(),
        )

    @classmethod
    def from_job(cls, job: JobApplication) -> FormState:
        """Fill an expanded form from an existing application."""
        return cls(
            company=job.company,
            position=job.position,
            date_applied=job.date_applied,
            notes=job.notes,
            url=job.url or "",
            status=job.status,
            is_expanded=True,
        )


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"


class SortColumn(Enum):
    COMPANY = "company"
    DATE_APPLIED = "date_applied"
    NONE = "none"


@dataclass
class JobTracker:
    """Everything the interface shows and edits."""

    jobs: list[JobApplication] = field(default_factory=list)
    form: FormState = field(default_factory=FormState)
    editing_index: int | None = None
    edit_form: FormState = field(default_factory=FormState)
    error_message: str | None = None
    last_saved: str | None = None
    search_query: str = ""
    filter_status: JobStatus | None = None
    has_unsaved_changes: bool = False
    sort_order: SortOrder = SortOrder.NONE
    sort_column: SortColumn = SortColumn.NONE
    data_path: str = storage.DATA_FILE

    @classmethod
    def from_storage(cls, path: str = storage.DATA_FILE) -> JobTracker:
        """Create a tracker from the data file, starting empty if it cannot be read."""
        try:
            jobs = storage.load_jobs(path)
        except storage.StorageError as err:
            print(f"Error loading jobs: {err}", file=sys.stderr)
            jobs = []
        return cls(jobs=jobs, data_path=path)

    def save(self) -> None:
        """Write the jobs to the data file, recording success or the error."""
        now = timestamp()
        try:
            storage.save_jobs(self.jobs, self.data_path)
        except storage.StorageError as err:
            self.error_message = f"Error saving: {err}"
            print(f"Error saving jobs: {err}", file=sys.stderr)
        else:
            self.last_saved = now
            self.error_message = None
            self.has_unsaved_changes = False

    def _matches(self, job: JobApplication) -> bool:
        if self.filter_status not in (None, JobStatus.ALL) and job.status != self.filter_status:
            return False
        if not self.search_query:
            return True
        query = self.search_query.lower()
        return any(query in text.lower() for text in (job.company, job.position, job.notes))

    def filtered_jobs(self) -> list[tuple[int, JobApplication]]:
        """Jobs passing the status filter and search query, with their indices."""
        return [(index, job) for index, job in enumerate(self.jobs) if self._matches(job)]

    def sorted_jobs(self) -> list[tuple[int, JobApplication]]:
        """Filtered jobs in the current sort order."""
        jobs = self.filtered_jobs()
        if self.sort_order is SortOrder.NONE:
            return jobs
        descending = self.sort_order is SortOrder.DESCENDING
        if self.sort_column is SortColumn.COMPANY:
            jobs.sort(key=lambda item: item[1].company.lower(), reverse=descending)
        elif self.sort_column is SortColumn.DATE_APPLIED:
            jobs.sort(key=lambda item: item[1].date_applied, reverse=descending)
        return jobs