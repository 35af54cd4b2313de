import json

import pytest

from jobtracker.app import App, parse_args
from jobtracker.data import JobStatus
from jobtracker.messages import (
    AddJob,
    CompanyChanged,
    DateChanged,
    PositionChanged,
    SearchQueryChanged,
    StatusSelected,
    ToggleForm,
)
from jobtracker.state import JobTracker
from jobtracker.storage import DATA_FILE
from jobtracker.ui.common import Container, Text


def walk(element):
    yield element
    for name in ("content", "children"):
        child = getattr(element, name, None)
        if isinstance(child, list):
            for item in child:
                yield from walk(item)
        elif child is not None and not isinstance(child, str):
            yield from walk(child)


def texts(element):
    return [e.content for e in walk(element) if isinstance(e, Text)]


def test_parse_args_default_data_file():
    assert parse_args([]).data == DATA_FILE


def test_parse_args_custom_data_file():
    assert parse_args(["--data", "jobs.json"]).data == "jobs.json"


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit):
        parse_args(["--bogus"])


def test_refresh_returns_view_of_state():
    app = App(None, JobTracker())
    tree = app.refresh()
    assert isinstance(tree, Container)
    assert "No changes" in texts(tree)


def test_dispatch_updates_state():
    app = App(None, JobTracker())
    app.dispatch(ToggleForm())
    assert app.state.form.is_expanded is True
    assert "Add New Application" in texts(app.refresh())


def test_dispatch_search_filters_view(tmp_path):
    app = App(None, JobTracker(data_path=str(tmp_path / "jobs.json")))
    app.dispatch(SearchQueryChanged("acme"))
    assert app.state.search_query == "acme"


def test_adding_job_saves_file(tmp_path):
    path = tmp_path / "jobs.json"
    app = App(None, JobTracker(data_path=str(path)))
    for message in (
        CompanyChanged("Acme"),
        PositionChanged("Engineer"),
        DateChanged("2024-01-01"),
        StatusSelected(JobStatus.APPLIED),
        AddJob(),
    ):
        app.dispatch(message)
    assert [job.company for job in app.state.jobs] == ["Acme"]
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved[0]["company"] == "Acme"
    assert saved[0]["status"] == "Applied"
    assert "Acme" in texts(app.refresh())
    assert app.state.has_unsaved_changes is False