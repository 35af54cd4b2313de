"""Desktop window that shows the tracker and feeds user actions back to it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any, Optional

from jobtracker.data import JobStatus
from jobtracker.state import JobTracker
from jobtracker.storage import DATA_FILE
from jobtracker.theme import BACKGROUND, TEXT, Color
from jobtracker.ui.common import (
    Button,
    ButtonStatus,
    ButtonStyle,
    Column,
    Container,
    PickList,
    Row,
    Rule,
    Space,
    Text,
    TextInput,
)
from jobtracker.ui.view import view
from jobtracker.update import update

WINDOW_TITLE = "Job Application Tracker"
WINDOW_SIZE = "1100x700"
FONT_FAMILY = "Helvetica"


def _blend(color: Optional[Color], under: Color) -> Color:
    """Flatten a translucent colour onto the colour beneath it."""
    if color is None or color.a <= 0.0:
        return under
    if color.a >= 1.0:
        return color
    a = color.a
    return Color(
        under.r * (1 - a) + color.r * a,
        under.g * (1 - a) + color.g * a,
        under.b * (1 - a) + color.b * a,
    )


def _pads(padding: Any) -> tuple[int, int]:
    """Horizontal and vertical padding in pixels."""
    if isinstance(padding, tuple):
        if len(padding) == 2:
            vertical, horizontal = padding
        else:
            top, right, _bottom, _left = padding
            vertical, horizontal = top, right
        return int(horizontal), int(vertical)
    return int(padding), int(padding)


def _weight(element: Any) -> int:
    portion = getattr(element, "fill_portion", None)
    if portion:
        return int(portion)
    return 1 if getattr(element, "width", None) == "fill" else 0


def _fills_width(element: Any) -> bool:
    width = getattr(element, "width", None)
    if isinstance(width, (int, float)):
        return False
    if width == "fill" or getattr(element, "fill_portion", None):
        return True
    return isinstance(element, (Row, Column, Container, TextInput, Rule))


def _label_of(content: Any) -> tuple[str, int]:
    if isinstance(content, Text):
        return content.content, content.size
    if isinstance(content, (Row, Column)):
        parts = [_label_of(child) for child in content.children]
        parts = [p for p in parts if p[0]]
        size = parts[0][1] if parts else 14
        return " ".join(p[0] for p in parts), size
    if isinstance(content, Container):
        return _label_of(content.content)
    return "", 14


class App:
    """Keeps a tracker state and, when given a window, draws it there."""

    def __init__(self, root: Any, state: JobTracker) -> None:
        self.root = root
        self.state = state
        self._tk: Any = None
        self._canvas: Any = None
        self._body: Any = None
        self._window_id: Any = None
        self._entries: dict[str, Any] = {}
        self._vars: list[Any] = []
        self._pending: Any = None
        if root is not None:
            self._build_window()
        self.refresh()

    def dispatch(self, message: Any) -> None:
        """Apply a message to the state and redraw."""
        update(self.state, message)
        self.refresh()

    def refresh(self) -> Container:
        """Rebuild the widget tree; the window is redrawn once idle."""
        tree = view(self.state)
        if self.root is not None:
            if self._pending is None:
                self._pending = self.root.after_idle(self._draw)
        return tree

    def _build_window(self) -> None:
        import tkinter as tk

        self._tk = tk
        self.root.configure(bg=BACKGROUND.hex)
        canvas = tk.Canvas(self.root, highlightthickness=0, bg=BACKGROUND.hex)
        scrollbar = tk.Scrollbar(self.root, command=canvas.yview)
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        canvas.pack(side="left", fill="both", expand=True)
        canvas.bind("<Configure>", self._on_canvas_resize)
        self.root.bind_all("<MouseWheel>", self._on_wheel)
        self.root.bind_all("<Button-4>", lambda _e: canvas.yview_scroll(-3, "units"))
        self.root.bind_all("<Button-5>", lambda _e: canvas.yview_scroll(3, "units"))
        self._canvas = canvas

    def _on_canvas_resize(self, event: Any) -> None:
        if self._window_id is not None:
            self._canvas.itemconfigure(self._window_id, width=event.width)

    def _on_wheel(self, event: Any) -> None:
        step = -1 if event.delta > 0 else 1
        self._canvas.yview_scroll(step * 3, "units")

    def _draw(self) -> None:
        self._pending = None
        focus_key, cursor = self._focused_entry()
        tk = self._tk
        if self._window_id is not None:
            self._canvas.delete(self._window_id)
        if self._body is not None:
            self._body.destroy()
        self._entries = {}
        self._vars = []
        body = tk.Frame(self._canvas, bg=BACKGROUND.hex)
        widget = self._make(view(self.state), body, BACKGROUND, TEXT)
        widget.pack(fill="both", expand=True)
        self._window_id = self._canvas.create_window(
            (0, 0), window=body, anchor="nw", width=self._canvas.winfo_width()
        )
        body.bind("<Configure>", lambda _e: self._canvas.configure(scrollregion=self._canvas.bbox("all")))
        self._body = body
        entry = self._entries.get(focus_key) if focus_key else None
        if entry is not None:
            entry.focus_set()
            entry.icursor(cursor)

    def _focused_entry(self) -> tuple[Optional[str], int]:
        try:
            focused = self.root.focus_get()
        except KeyError:
            return None, 0
        for key, entry in self._entries.items():
            if entry is focused:
                return key, entry.index("insert")
        return None, 0

    def _make(self, element: Any, master: Any, bg: Color, fg: Color) -> Any:
        tk = self._tk
        if isinstance(element, Container):
            return self._make_container(element, master, bg, fg)
        if isinstance(element, Row):
            return self._make_row(element, master, bg, fg)
        if isinstance(element, Column):
            return self._make_column(element, master, bg, fg)
        if isinstance(element, Text):
            color = element.style.color if element.style and element.style.color else fg
            return tk.Label(
                master,
                text=element.content,
                font=(FONT_FAMILY, element.size),
                fg=_blend(color, bg).hex,
                bg=bg.hex,
                anchor="center" if element.centered else "w",
                justify="left",
            )
        if isinstance(element, Button):
            return self._make_button(element, master, bg)
        if isinstance(element, TextInput):
            return self._make_entry(element, master, bg)
        if isinstance(element, PickList):
            return self._make_picker(element, master, bg)
        if isinstance(element, Rule):
            return tk.Frame(master, height=element.thickness, bg=_blend(element.color, bg).hex)
        if isinstance(element, Space):
            width = element.width if isinstance(element.width, (int, float)) else 1
            height = element.height if isinstance(element.height, (int, float)) else 1
            return tk.Frame(master, width=int(width), height=int(height), bg=bg.hex)
        raise TypeError(f"cannot draw {element!r}")

    def _make_container(self, element: Container, master: Any, bg: Color, fg: Color) -> Any:
        style = element.style
        inner_bg = _blend(style.background, bg) if style else bg
        inner_fg = style.text_color if style and style.text_color else fg
        border_width = int(round(style.border.width)) if style else 0
        border_color = _blend(style.border.color, bg).hex if style else bg.hex
        frame = self._tk.Frame(
            master,
            bg=inner_bg.hex,
            highlightthickness=border_width,
            highlightbackground=border_color,
            highlightcolor=border_color,
        )
        child = self._make(element.content, frame, inner_bg, inner_fg)
        padx, pady = _pads(element.padding)
        if _fills_width(element.content):
            child.pack(fill="x", padx=padx, pady=pady)
        else:
            child.pack(anchor="w", padx=padx, pady=pady)
        return frame

    def _make_row(self, element: Row, master: Any, bg: Color, fg: Color) -> Any:
        padx, pady = _pads(element.padding)
        frame = self._tk.Frame(master, bg=bg.hex, padx=padx, pady=pady)
        for column, child in enumerate(element.children):
            widget = self._make(child, frame, bg, fg)
            weight = _weight(child)
            uniform = "portion" if getattr(child, "fill_portion", None) else ""
            frame.columnconfigure(column, weight=weight, uniform=uniform)
            gap = int(element.spacing) if column else 0
            widget.grid(row=0, column=column, sticky="ew" if weight else "w", padx=(gap, 0))
        return frame

    def _make_column(self, element: Column, master: Any, bg: Color, fg: Color) -> Any:
        padx, pady = _pads(element.padding)
        frame = self._tk.Frame(master, bg=bg.hex, padx=padx, pady=pady)
        for position, child in enumerate(element.children):
            widget = self._make(child, frame, bg, fg)
            gap = int(element.spacing) if position else 0
            if _fills_width(child) and not element.align_center:
                widget.pack(fill="x", pady=(gap, 0))
            else:
                widget.pack(anchor="center" if element.align_center else "w", pady=(gap, 0))
        return frame

    def _make_button(self, element: Button, master: Any, bg: Color) -> Any:
        style = element.style(ButtonStatus.ACTIVE) if element.style else ButtonStyle()
        hover = element.style(ButtonStatus.HOVERED) if element.style else style
        label, size = _label_of(element.content)
        padx, pady = _pads(element.padding)
        message = element.on_press
        border = _blend(style.border.color, bg).hex
        return self._tk.Button(
            master,
            text=label,
            font=(FONT_FAMILY, size),
            fg=_blend(style.text_color, bg).hex,
            bg=_blend(style.background, bg).hex,
            activeforeground=_blend(hover.text_color, bg).hex,
            activebackground=_blend(hover.background, bg).hex,
            relief="flat",
            bd=0,
            highlightthickness=int(round(style.border.width)),
            highlightbackground=border,
            highlightcolor=border,
            padx=padx,
            pady=pady,
            cursor="hand2",
            state="normal" if message is not None else "disabled",
            command=lambda: self.dispatch(message),
        )

    def _make_entry(self, element: TextInput, master: Any, bg: Color) -> Any:
        tk = self._tk
        variable = tk.StringVar(master=master, value=element.value)
        options: dict[str, Any] = {}
        if isinstance(element.width, (int, float)):
            options["width"] = max(1, int(element.width) // 8)
        style = element.style
        if style is not None:
            field_bg = _blend(style.background, bg)
            options.update(
                bg=field_bg.hex,
                fg=style.value.hex,
                insertbackground=style.value.hex,
                selectbackground=_blend(style.selection, field_bg).hex,
                highlightthickness=int(round(style.border.width)),
                highlightbackground=_blend(style.border.color, bg).hex,
                highlightcolor=_blend(style.border.color, bg).hex,
            )
        entry = tk.Entry(master, textvariable=variable, relief="flat", font=(FONT_FAMILY, 12), **options)
        on_input = element.on_input
        if on_input is not None:
            variable.trace_add("write", lambda *_: self.dispatch(on_input(variable.get())))
        self._vars.append(variable)
        self._entries[element.placeholder] = entry
        return entry

    def _make_picker(self, element: PickList, master: Any, bg: Color) -> Any:
        tk = self._tk
        selected = str(element.selected) if element.selected is not None else ""
        variable = tk.StringVar(master=master, value=selected)
        on_select = element.on_select

        def choose(value: str) -> None:
            if on_select is not None:
                self.dispatch(on_select(JobStatus(value)))

        menu = tk.OptionMenu(master, variable, *(str(option) for option in element.options), command=choose)
        style = element.style
        if style is not None:
            field_bg = _blend(style.background, bg).hex
            text_color = _blend(style.text_color, bg).hex
            menu.configure(
                bg=field_bg,
                fg=text_color,
                activebackground=field_bg,
                activeforeground=text_color,
                highlightthickness=int(round(style.border.width)),
                highlightbackground=_blend(style.border.color, bg).hex,
                relief="flat",
            )
            menu["menu"].configure(bg=field_bg, fg=text_color)
        self._vars.append(variable)
        return menu


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(prog="job_tracker", description="Track job applications.")
    parser.add_argument(
        "--data",
        default=DATA_FILE,
        help=f"JSON file holding the applications (default: {DATA_FILE})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the tracker window and run until it is closed."""
    args = parse_args(argv)
    import tkinter as tk

    state = JobTracker.from_storage(args.data)
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry(WINDOW_SIZE)
    App(root, state)
    root.mainloop()
    return 0