"""Colour palette for the tracker's dark theme."""

from __future__ import annotations

from dataclasses import dataclass, replace

from jobtracker.data import JobStatus


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        return cls(r, g, b, 1.0)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(r, g, b, a)

    @property
    def hex(self) -> str:
        """The colour as ``#rrggbb``, ignoring alpha."""
        channels = (round(max(0.0, min(1.0, c)) * 255) for c in (self.r, self.g, self.b))
        return "#" + "".join(f"{c:02x}" for c in channels)


WHITE = Color.from_rgb(1.0, 1.0, 1.0)
BLACK = Color.from_rgb(0.0, 0.0, 0.0)
TRANSPARENT = Color.from_rgba(0.0, 0.0, 0.0, 0.0)

BACKGROUND = Color.from_rgb(0.078, 0.086, 0.102)
CARD_BG = Color.from_rgb(0.098, 0.106, 0.122)
HEADER_BG = Color.from_rgb(0.055, 0.063, 0.075)
TEXT = Color.from_rgb(0.88, 0.90, 0.92)
SECONDARY_TEXT = Color.from_rgb(0.63, 0.65, 0.67)
HIGHLIGHT = Color.from_rgb(0.129, 0.737, 0.514)
HIGHLIGHT_HOVER = Color.from_rgb(0.169, 0.847, 0.584)
HIGHLIGHT_SUBTLE = Color.from_rgba(0.129, 0.737, 0.514, 0.12)
NEGATIVE = Color.from_rgb(0.949, 0.267, 0.267)
NEGATIVE_DARK = Color.from_rgb(0.649, 0.137, 0.137)
WARNING = Color.from_rgb(0.945, 0.769, 0.059)
BORDER = Color.from_rgb(0.149, 0.169, 0.204)
CARD_BORDER = Color.from_rgb(0.169, 0.189, 0.224)
WARNING_SUBTLE = Color.from_rgba(0.945, 0.769, 0.059, 0.3)

_STATUS_COLORS = {
    JobStatus.APPLIED: Color.from_rgb(0.22, 0.51, 0.78),
    JobStatus.OA: Color.from_rgb(0.90, 0.62, 0.0),
    JobStatus.INTERVIEW: HIGHLIGHT,
    JobStatus.REJECTED: NEGATIVE,
    JobStatus.OFFER: Color.from_rgb(0.608, 0.349, 0.714),
    JobStatus.ACCEPTED: HIGHLIGHT,
    JobStatus.WITHDRAWN: Color.from_rgb(0.5, 0.5, 0.5),
    JobStatus.ALL: Color.from_rgb(0.4, 0.4, 0.4),
}


def status_color(status: JobStatus) -> Color:
    """The badge colour for a status."""
    return _STATUS_COLORS[status]


def with_alpha(color: Color, alpha: float) -> Color:
    """The same colour with its alpha set to ``alpha``."""
    return replace(color, a=alpha)


def fade_color(color: Color, factor: float) -> Color:
    """The same colour with its alpha multiplied by ``factor``."""
    return replace(color, a=color.a * factor)