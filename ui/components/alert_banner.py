import customtkinter as ctk

from utils.constants import NOTIFICATION_DISMISS_MS, SEVERITY_COLORS


class AlertBanner(ctk.CTkFrame):
    """A dismissible colored banner that closes itself after dismiss_ms (0 = never)."""

    def __init__(self, master, message: str, kind: str = "success",
                 dismiss_ms: int = NOTIFICATION_DISMISS_MS, **kwargs):
        color = SEVERITY_COLORS.get(kind, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=message, text_color="white",
            anchor="w", padx=10, pady=6
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            hover_color="#ffffff",
            text_color="white",
            command=self.destroy,
        ).grid(row=0, column=1, padx=(0, 4))

        if dismiss_ms:
            self.after(dismiss_ms, self._auto_dismiss)

    def _auto_dismiss(self):
        if self.winfo_exists():
            self.destroy()
