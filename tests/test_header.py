from jobtracker.data import JobApplication, JobStatus
from jobtracker.messages import CancelEdit, ErrorDismissed, FilterStatusChanged, ToggleForm
from jobtracker.state import FormState, JobTracker
from jobtracker.theme import HEADER_BG, HIGHLIGHT, WARNING, WHITE
from jobtracker.ui.common import Button, ButtonStatus, PickList, Text
from jobtracker.ui.header import (
    app_header,
    editing_action_button_style,
    editing_button_style,
    header_style,
    save_status_text,
    toggle_form_button_style,
)


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


def buttons(element):
    return [e for e in walk(element) if isinstance(e, Button)]


def make_job(company="Acme"):
    return JobApplication(company, "Engineer", "2024-01-01", JobStatus.APPLIED, "")


def test_save_status_unsaved_wins():
    state = JobTracker(has_unsaved_changes=True, last_saved="2024-01-01 10:00:00")
    assert save_status_text(state) == "Unsaved changes"


def test_save_status_last_saved():
    state = JobTracker(last_saved="2024-01-01 10:00:00")
    assert save_status_text(state) == "Last saved: 2024-01-01 10:00:00"


def test_save_status_no_changes():
    assert save_status_text(JobTracker()) == "No changes"


def test_toggle_button_label_follows_form():
    collapsed = app_header(JobTracker())
    expanded = app_header(JobTracker(form=FormState(is_expanded=True)))
    assert "Add New Job" in texts(collapsed)
    assert "Hide Form" in texts(expanded)
    toggles = [b for b in buttons(collapsed) if b.on_press == ToggleForm()]
    assert len(toggles) == 1


def test_editing_shows_exit_button_and_notice():
    state = JobTracker(jobs=[make_job()], editing_index=0)
    header = app_header(state)
    labels = texts(header)
    assert "Exit Edit Mode" in labels
    assert "Currently in edit mode - other actions are limited" in labels
    assert any(b.on_press == CancelEdit() for b in buttons(header))


def test_application_count_shown():
    state = JobTracker(jobs=[make_job("A"), make_job("B")])
    assert f"{len(state.jobs)} APPLICATIONS" in texts(app_header(state))


def test_error_banner_only_with_error():
    assert not any(b.on_press == ErrorDismissed() for b in buttons(app_header(JobTracker())))
    header = app_header(JobTracker(error_message="Error saving: disk full"))
    assert "Error saving: disk full" in texts(header)
    assert any(b.on_press == ErrorDismissed() for b in buttons(header))


def test_filter_picker_options_and_message():
    state = JobTracker(filter_status=JobStatus.OFFER)
    pickers = [e for e in walk(app_header(state)) if isinstance(e, PickList)]
    assert len(pickers) == 1
    picker = pickers[0]
    assert picker.options[0] is JobStatus.ALL
    assert set(picker.options) == set(JobStatus)
    assert picker.selected is JobStatus.OFFER
    assert picker.on_select(JobStatus.OA) == FilterStatusChanged(JobStatus.OA)


def test_filter_dimmed_while_editing():
    normal = [e for e in walk(app_header(JobTracker())) if isinstance(e, PickList)][0]
    editing_state = JobTracker(jobs=[make_job()], editing_index=0)
    dimmed = [e for e in walk(app_header(editing_state)) if isinstance(e, PickList)][0]
    assert normal.style.text_color.a == 1.0
    assert dimmed.style.text_color.a < normal.style.text_color.a


def test_toggle_style_hover_border():
    assert toggle_form_button_style(ButtonStatus.HOVERED).border.color == HIGHLIGHT
    assert toggle_form_button_style(ButtonStatus.ACTIVE).text_color == HIGHLIGHT


def test_editing_action_style_builds_on_editing_style():
    base = editing_button_style(ButtonStatus.ACTIVE)
    action = editing_action_button_style(ButtonStatus.ACTIVE)
    assert action.border.color == base.border.color
    assert action.shadow == base.shadow
    assert action.text_color == WHITE
    assert editing_action_button_style(ButtonStatus.HOVERED).border.color == WARNING


def test_header_style_background():
    assert header_style().background == HEADER_BG