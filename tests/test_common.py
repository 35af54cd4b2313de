import pytest

from jobtracker.data import JobStatus
from jobtracker.theme import (
    BACKGROUND,
    BORDER,
    CARD_BG,
    CARD_BORDER,
    HEADER_BG,
    HIGHLIGHT,
    HIGHLIGHT_HOVER,
    HIGHLIGHT_SUBTLE,
    NEGATIVE,
    NEGATIVE_DARK,
    SECONDARY_TEXT,
    TEXT,
    TRANSPARENT,
    WHITE,
    status_color,
)
from jobtracker.ui.common import (
    Border,
    ButtonStatus,
    Column,
    Container,
    Row,
    Shadow,
    Space,
    Text,
    card_style,
    company_text_style,
    delete_button_style,
    edit_button_style,
    filter_section_style,
    input_style,
    link_button_style,
    main_background,
    position_text_style,
    primary_button_style,
    save_button_style,
    secondary_button_style,
    status_badge_style,
    table_header_style,
)


def test_main_background_colours():
    style = main_background()
    assert style.background == BACKGROUND
    assert style.text_color == TEXT


def test_table_header_style_colours():
    style = table_header_style()
    assert style.background == HEADER_BG
    assert style.text_color == SECONDARY_TEXT
    assert style.border.color == BORDER


def test_plain_card_uses_card_palette():
    for status in (JobStatus.APPLIED, JobStatus.OA, JobStatus.INTERVIEW):
        style = card_style(status)
        assert style.background == CARD_BG
        assert style.border.color == CARD_BORDER


def test_rejected_card_has_dark_red_border():
    style = card_style(JobStatus.REJECTED)
    assert style.border.color == NEGATIVE_DARK
    assert style.background != CARD_BG


@pytest.mark.parametrize("status", [JobStatus.ACCEPTED, JobStatus.OFFER])
def test_good_outcomes_have_thicker_border(status):
    assert card_style(status).border.width > card_style(JobStatus.APPLIED).border.width
    assert card_style(status).border.radius == card_style(JobStatus.APPLIED).border.radius


@pytest.mark.parametrize("status", list(JobStatus))
def test_badge_is_filled_with_status_colour(status):
    style = status_badge_style(status)
    assert style.background == status_color(status)
    assert style.border.color == status_color(status)
    assert style.text_color == WHITE


@pytest.mark.parametrize("status", [JobStatus.ACCEPTED, JobStatus.REJECTED, JobStatus.OFFER])
def test_notable_badges_glow_without_offset(status):
    glow = status_badge_style(status).shadow
    assert glow.offset == (0.0, 0.0)
    assert glow != status_badge_style(JobStatus.APPLIED).shadow


def test_link_button_non_hover_states_share_a_style():
    active = link_button_style(ButtonStatus.ACTIVE)
    assert link_button_style(ButtonStatus.PRESSED) == active
    assert link_button_style(ButtonStatus.DISABLED) == active
    assert link_button_style(ButtonStatus.HOVERED).background == HIGHLIGHT_SUBTLE


def test_edit_button_non_hover_states_share_a_style():
    active = edit_button_style(ButtonStatus.ACTIVE)
    assert edit_button_style(ButtonStatus.PRESSED) == active
    assert edit_button_style(ButtonStatus.DISABLED) == active
    assert active.background == TRANSPARENT


def test_delete_button_non_hover_states_share_a_style():
    active = delete_button_style(ButtonStatus.ACTIVE)
    assert delete_button_style(ButtonStatus.PRESSED) == active
    assert delete_button_style(ButtonStatus.DISABLED) == active
    assert delete_button_style(ButtonStatus.HOVERED).border.color == NEGATIVE


def test_primary_button_non_hover_states_share_a_style():
    active = primary_button_style(ButtonStatus.ACTIVE)
    assert primary_button_style(ButtonStatus.PRESSED) == active
    assert primary_button_style(ButtonStatus.DISABLED) == active
    assert primary_button_style(ButtonStatus.HOVERED).background == HIGHLIGHT_HOVER


def test_save_button_non_hover_states_share_a_style():
    active = save_button_style(ButtonStatus.ACTIVE)
    assert save_button_style(ButtonStatus.PRESSED) == active
    assert save_button_style(ButtonStatus.DISABLED) == active
    assert (save_button_style(ButtonStatus.HOVERED) == active) is False


def test_secondary_button_non_hover_states_share_a_style():
    active = secondary_button_style(ButtonStatus.ACTIVE)
    assert secondary_button_style(ButtonStatus.PRESSED) == active
    assert secondary_button_style(ButtonStatus.DISABLED) == active
    assert (secondary_button_style(ButtonStatus.HOVERED) == active) is False


def test_link_button_colours():
    assert link_button_style(ButtonStatus.ACTIVE).text_color == HIGHLIGHT
    assert link_button_style(ButtonStatus.ACTIVE).background == TRANSPARENT
    hovered = link_button_style(ButtonStatus.HOVERED)
    assert hovered.text_color == HIGHLIGHT_HOVER
    assert hovered.background == HIGHLIGHT_SUBTLE
    assert hovered.border.color == HIGHLIGHT


def test_delete_button_is_red():
    for status in ButtonStatus:
        assert delete_button_style(status).text_color == NEGATIVE


def test_edit_button_keeps_text_colour_on_hover():
    active = edit_button_style(ButtonStatus.ACTIVE)
    hovered = edit_button_style(ButtonStatus.HOVERED)
    assert active.text_color == hovered.text_color
    assert hovered.border.color == hovered.text_color


def test_primary_button_colours():
    active = primary_button_style(ButtonStatus.ACTIVE)
    assert active.background == HIGHLIGHT
    assert active.text_color == WHITE
    assert primary_button_style(ButtonStatus.HOVERED).background == HIGHLIGHT_HOVER


@pytest.mark.parametrize("status", list(ButtonStatus))
def test_save_button_is_primary_shape_in_another_colour(status):
    save = save_button_style(status)
    primary = primary_button_style(status)
    assert save.border.color == save.background
    assert save.background != primary.background
    assert save.border.radius == primary.border.radius
    assert save.shadow.offset == primary.shadow.offset
    assert save.text_color == primary.text_color


def test_secondary_button_border():
    for status in ButtonStatus:
        style = secondary_button_style(status)
        assert style.border.color == BORDER
        assert style.text_color == TEXT


def test_input_style_colours():
    style = input_style()
    assert style.value == TEXT
    assert style.placeholder == SECONDARY_TEXT
    assert style.selection == HIGHLIGHT_SUBTLE
    assert style.border.color == BORDER
    assert input_style("focused") == style


@pytest.mark.parametrize("status", list(JobStatus))
def test_text_styles_mute_closed_applications(status):
    expected = SECONDARY_TEXT if status in (JobStatus.REJECTED, JobStatus.WITHDRAWN) else TEXT
    assert company_text_style(status).color == expected
    assert position_text_style(status) == company_text_style(status)


def test_filter_section_has_square_border():
    style = filter_section_style()
    assert style.border.radius == 0.0
    assert style.text_color == TEXT


def test_style_defaults_are_transparent():
    assert Border().color == TRANSPARENT
    assert Shadow().color == TRANSPARENT


def test_layout_children_are_not_shared():
    first, second = Row(), Row()
    first.children.append(Text("a"))
    assert second.children == []
    assert Column().children == []


def test_container_wraps_content():
    inner = Space(height=0.0)
    box = Container(inner, width="fill", style=main_background())
    assert box.content is inner
    assert box.style.background == BACKGROUND