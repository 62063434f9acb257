import customtkinter as ctk

from models.transaction import Transaction
from utils.constants import TYPE_COLORS
from utils.currency import format_signed
from utils.date_helpers import format_display_date


def render_transaction_list(container, transactions: list[Transaction], empty_message: str):
    """Replace container's children with one row per transaction, or empty_message."""
    for w in container.winfo_children():
        w.destroy()

    if not transactions:
        ctk.CTkLabel(container, text=empty_message, text_color="gray60").pack(pady=20)
        return

    for idx, tx in enumerate(transactions):
        bg = ("gray90", "gray20") if idx % 2 == 0 else ("gray86", "gray24")
        row = ctk.CTkFrame(container, fg_color=bg, corner_radius=4)
        row.pack(fill="x", pady=1)
        row.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            row, text=tx.description or "—", anchor="w",
            font=ctk.CTkFont(weight="bold"),
        ).grid(row=0, column=0, padx=8, pady=(4, 0), sticky="ew")
        ctk.CTkLabel(
            row,
            text=f"{tx.category} • {tx.account} • {format_display_date(tx.date)}",
            anchor="w", text_color="gray60", font=ctk.CTkFont(size=11),
        ).grid(row=1, column=0, padx=8, pady=(0, 4), sticky="ew")
        ctk.CTkLabel(
            row, text=format_signed(tx.amount, tx.type),
            text_color=TYPE_COLORS.get(tx.type, "gray"),
            font=ctk.CTkFont(size=15, weight="bold"),
            anchor="e", width=140,
        ).grid(row=0, column=1, rowspan=2, padx=8)
