"""Widget descriptions and the shared styles of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

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
    Color,
    status_color,
)

# A width or height: None shrinks to content, "fill" takes the space left,
# a number is a fixed size in pixels.
Size = Union[None, str, float]
Padding = Union[float, tuple[float, float], tuple[float, float, float, float]]


@dataclass(frozen=True)
class Border:
    color: Color = TRANSPARENT
    width: float = 0.0
    radius: float = 0.0


@dataclass(frozen=True)
class Shadow:
    color: Color = TRANSPARENT
    offset: tuple[float, float] = (0.0, 0.0)
    blur_radius: float = 0.0


@dataclass(frozen=True)
class ContainerStyle:
    background: Optional[Color] = None
    text_color: Optional[Color] = None
    border: Border = Border()
    shadow: Shadow = Shadow()


@dataclass(frozen=True)
class ButtonStyle:
    background: Optional[Color] = None
    text_color: Color = BACKGROUND
    border: Border = Border()
    shadow: Shadow = Shadow()


class ButtonStatus(Enum):
    ACTIVE = "active"
    HOVERED = "hovered"
    PRESSED = "pressed"
    DISABLED = "disabled"


@dataclass(frozen=True)
class TextInputStyle:
    background: Color
    border: Border
    icon: Color
    placeholder: Color
    value: Color
    selection: Color


@dataclass(frozen=True)
class PickListStyle:
    text_color: Color
    placeholder_color: Color
    handle_color: Color
    background: Color
    border: Border


@dataclass(frozen=True)
class TextStyle:
    color: Optional[Color] = None


ButtonStyler = Callable[[ButtonStatus], ButtonStyle]


@dataclass
class Text:
    content: str
    size: int = 16
    style: Optional[TextStyle] = None
    width: Size = None
    fill_portion: Optional[int] = None
    centered: bool = False


@dataclass
class Button:
    content: Any
    on_press: Any = None
    style: Optional[ButtonStyler] = None
    padding: Padding = 5.0
    width: Size = None
    fill_portion: Optional[int] = None


@dataclass
class TextInput:
    placeholder: str
    value: str
    on_input: Optional[Callable[[str], Any]] = None
    style: Optional[TextInputStyle] = None
    padding: Padding = 5.0
    width: Size = None


@dataclass
class PickList:
    options: Sequence[JobStatus]
    selected: Optional[JobStatus]
    on_select: Optional[Callable[[JobStatus], Any]] = None
    style: Optional[PickListStyle] = None
    padding: Padding = 5.0
    width: Size = None


@dataclass
class Space:
    width: Size = None
    height: Size = None


@dataclass
class Row:
    children: list[Any] = field(default_factory=list)
    spacing: float = 0.0
    padding: Padding = 0.0
    align_center: bool = False
    width: Size = None
    fill_portion: Optional[int] = None


@dataclass
class Column:
    children: list[Any] = field(default_factory=list)
    spacing: float = 0.0
    padding: Padding = 0.0
    align_center: bool = False
    width: Size = None
    fill_portion: Optional[int] = None


@dataclass
class Container:
    content: Any
    style: Optional[ContainerStyle] = None
    padding: Padding = 0.0
    width: Size = None
    height: Size = None
    fill_portion: Optional[int] = None


@dataclass
class Rule:
    thickness: int = 1
    color: Color = BORDER


def main_background() -> ContainerStyle:
    return ContainerStyle(background=BACKGROUND, text_color=TEXT)


def table_header_style() -> ContainerStyle:
    return ContainerStyle(
        background=HEADER_BG,
        text_color=SECONDARY_TEXT,
        border=Border(color=BORDER, width=0.0, radius=6.0),
        shadow=Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.2), (0.0, 1.0), 2.0),
    )


def card_style(status: JobStatus) -> ContainerStyle:
    """Card look for a job row, tinted by its status."""
    style = ContainerStyle(
        background=CARD_BG,
        text_color=TEXT,
        border=Border(color=CARD_BORDER, width=1.0, radius=8.0),
        shadow=Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.25), (0.0, 4.0), 8.0),
    )
    if status is JobStatus.REJECTED:
        return replace(
            style,
            background=Color.from_rgb(0.13, 0.106, 0.112),
            border=replace(style.border, color=NEGATIVE_DARK, width=1.0),
        )
    if status is JobStatus.WITHDRAWN:
        return replace(
            style,
            background=Color.from_rgb(0.088, 0.096, 0.112),
            border=replace(style.border, color=Color.from_rgb(0.3, 0.3, 0.3)),
        )
    if status is JobStatus.ACCEPTED:
        return replace(
            style,
            background=Color.from_rgb(0.088, 0.116, 0.112),
            border=replace(style.border, color=Color.from_rgba(0.129, 0.737, 0.514, 0.5), width=1.5),
        )
    if status is JobStatus.OFFER:
        return replace(
            style,
            background=Color.from_rgb(0.108, 0.096, 0.132),
            border=replace(style.border, color=Color.from_rgba(0.608, 0.349, 0.714, 0.5), width=1.5),
        )
    return style


_BADGE_GLOW = {
    JobStatus.ACCEPTED: Shadow(Color.from_rgba(0.129, 0.737, 0.514, 0.6), (0.0, 0.0), 8.0),
    JobStatus.REJECTED: Shadow(Color.from_rgba(0.949, 0.267, 0.267, 0.4), (0.0, 0.0), 6.0),
    JobStatus.OFFER: Shadow(Color.from_rgba(0.608, 0.349, 0.714, 0.5), (0.0, 0.0), 8.0),
}


def status_badge_style(status: JobStatus) -> ContainerStyle:
    """Badge filled with the status colour, glowing for notable outcomes."""
    color = status_color(status)
    default_shadow = Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.2), (0.0, 2.0), 4.0)
    return ContainerStyle(
        background=color,
        text_color=WHITE,
        border=Border(color=color, width=0.0, radius=4.0),
        shadow=_BADGE_GLOW.get(status, default_shadow),
    )


def _outline_button(status: ButtonStatus, accent: Color, hover_text: Color, hover_bg: Color, glow: Color) -> ButtonStyle:
    if status is ButtonStatus.HOVERED:
        return ButtonStyle(
            background=hover_bg,
            text_color=hover_text,
            border=Border(color=accent, width=1.0, radius=4.0),
            shadow=Shadow(glow, (0.0, 0.0), 6.0),
        )
    return ButtonStyle(
        background=TRANSPARENT,
        text_color=hover_text if accent != HIGHLIGHT else accent,
        border=Border(color=TRANSPARENT, width=0.0, radius=4.0),
        shadow=Shadow(),
    )


def link_button_style(status: ButtonStatus) -> ButtonStyle:
    return _outline_button(
        status,
        accent=HIGHLIGHT,
        hover_text=HIGHLIGHT_HOVER,
        hover_bg=HIGHLIGHT_SUBTLE,
        glow=Color.from_rgba(0.129, 0.737, 0.514, 0.2),
    )


def edit_button_style(status: ButtonStatus) -> ButtonStyle:
    yellow = Color.from_rgb(0.945, 0.769, 0.059)
    return _outline_button(
        status,
        accent=yellow,
        hover_text=yellow,
        hover_bg=Color.from_rgba(0.945, 0.769, 0.059, 0.15),
        glow=Color.from_rgba(0.945, 0.769, 0.059, 0.2),
    )


def delete_button_style(status: ButtonStatus) -> ButtonStyle:
    return _outline_button(
        status,
        accent=NEGATIVE,
        hover_text=NEGATIVE,
        hover_bg=Color.from_rgba(0.949, 0.267, 0.267, 0.15),
        glow=Color.from_rgba(0.949, 0.267, 0.267, 0.2),
    )


def primary_button_style(status: ButtonStatus) -> ButtonStyle:
    if status is ButtonStatus.HOVERED:
        return ButtonStyle(
            background=HIGHLIGHT_HOVER,
            text_color=WHITE,
            border=Border(color=HIGHLIGHT_HOVER, width=0.0, radius=6.0),
            shadow=Shadow(Color.from_rgba(0.129, 0.737, 0.514, 0.4), (0.0, 2.0), 8.0),
        )
    return ButtonStyle(
        background=HIGHLIGHT,
        text_color=WHITE,
        border=Border(color=HIGHLIGHT, width=0.0, radius=6.0),
        shadow=Shadow(Color.from_rgba(0.129, 0.737, 0.514, 0.2), (0.0, 1.0), 4.0),
    )


def save_button_style(status: ButtonStatus) -> ButtonStyle:
    """The primary button shape in blue."""
    style = primary_button_style(status)
    if status is ButtonStatus.HOVERED:
        fill = Color.from_rgb(0.22, 0.69, 0.9)
        glow = Color.from_rgba(0.22, 0.69, 0.9, 0.4)
    else:
        fill = Color.from_rgb(0.18, 0.59, 0.8)
        glow = Color.from_rgba(0.18, 0.59, 0.8, 0.2)
    return replace(
        style,
        background=fill,
        border=replace(style.border, color=fill),
        shadow=replace(style.shadow, color=glow),
    )


def secondary_button_style(status: ButtonStatus) -> ButtonStyle:
    if status is ButtonStatus.HOVERED:
        return ButtonStyle(
            background=Color.from_rgb(0.18, 0.2, 0.22),
            text_color=TEXT,
            border=Border(color=BORDER, width=1.0, radius=6.0),
            shadow=Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.2), (0.0, 1.0), 3.0),
        )
    return ButtonStyle(
        background=Color.from_rgb(0.12, 0.14, 0.16),
        text_color=TEXT,
        border=Border(color=BORDER, width=1.0, radius=6.0),
        shadow=Shadow(Color.from_rgba(0.0, 0.0, 0.0, 0.1), (0.0, 1.0), 2.0),
    )


def input_style(status: Any = None) -> TextInputStyle:
    """Text input look; the same in every interaction state."""
    return TextInputStyle(
        background=Color.from_rgb(0.11, 0.12, 0.14),
        border=Border(color=BORDER, width=1.0, radius=6.0),
        icon=SECONDARY_TEXT,
        placeholder=SECONDARY_TEXT,
        value=TEXT,
        selection=HIGHLIGHT_SUBTLE,
    )


def _muted_for_closed(status: JobStatus) -> TextStyle:
    if status in (JobStatus.REJECTED, JobStatus.WITHDRAWN):
        return TextStyle(color=SECONDARY_TEXT)
    return TextStyle(color=TEXT)


def company_text_style(status: JobStatus) -> TextStyle:
    return _muted_for_closed(status)


def position_text_style(status: JobStatus) -> TextStyle:
    return _muted_for_closed(status)


def filter_section_style() -> ContainerStyle:
    return ContainerStyle(
        background=Color.from_rgb(0.06, 0.07, 0.08),
        text_color=TEXT,
        border=Border(color=Color.from_rgb(0.12, 0.14, 0.16), width=1.0, radius=0.0),
    )