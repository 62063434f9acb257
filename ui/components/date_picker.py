import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from utils.date_helpers import parse_date, format_date, today
from datetime import date


class DatePickerWidget(ctk.CTkFrame):
    """Reusable date picker: CTkEntry + calendar popup button.

    .get() returns a YYYY-MM-DD string, or '' if empty/invalid.
    .set(date_str) accepts YYYY-MM-DD (or '' to clear).
    """

    def __init__(self, master, initial_date: str | None = None, width: int = 110, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self._popup: ctk.CTkToplevel | None = None
        self._on_change = None

        self._var = tk.StringVar(value=initial_date or "")

        self._entry = ctk.CTkEntry(
            self, textvariable=self._var, width=width, placeholder_text="YYYY-MM-DD",
        )
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_focus_out)

        ctk.CTkButton(
            self, text="📅", width=32, command=self._open_popup
        ).grid(row=0, column=1, padx=(4, 0))

    def on_change(self, callback):
        """Register callback() fired after the date is committed (popup or focus-out)."""
        self._on_change = callback

    def get(self) -> str:
        d = self._parse()
        return format_date(d) if d else ""

    def set(self, date_str: str):
        d = parse_date(date_str) if date_str else None
        self._var.set(format_date(d) if d else "")
        self._reset_border()

    def set_today(self):
        self.set(format_date(today()))

    def is_valid(self) -> bool:
        return self._parse() is not None

    def _parse(self) -> date | None:
        raw = self._var.get().strip()
        if not raw:
            return None
        return parse_date(raw.replace("/", "-").replace(".", "-"))

    def _fire_change(self):
        if self._on_change:
            self._on_change()

    def _on_focus_out(self, _event=None):
        raw = self._var.get().strip()
        if not raw:
            self._reset_border()
            self._fire_change()
            return
        d = self._parse()
        if d:
            self._var.set(format_date(d))
            self._reset_border()
            self._fire_change()
        else:
            self._entry.configure(border_color="#F44336")

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        # Theme the calendar to match CTk appearance
        if ctk.get_appearance_mode() == "Dark":
            bg, fg = "#2b2b2b", "#ffffff"
        else:
            bg, fg = "#ffffff", "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure("Calendar.Treeview", background=bg, foreground=fg, fieldbackground=bg)

        current = self._parse() or today()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#1f6aa5",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal, popup))

        # Position below the entry
        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

        popup.bind("<FocusOut>", lambda e: self._maybe_close(popup))

    def _on_date_selected(self, cal, popup):
        self.set(cal.get_date())
        popup.destroy()
        self._popup = None
        self._fire_change()

    def _maybe_close(self, popup):
        if not popup.winfo_exists():
            return
        focused = popup.focus_get()
        if focused is None or not str(focused).startswith(str(popup)):
            popup.destroy()
            self._popup = None
