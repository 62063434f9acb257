import customtkinter as ctk

from models.transaction_filter import TransactionFilter
from services.category_service import all_categories
from services.filter_service import filter_transactions
from services.ledger_service import LedgerService
from ui.components.date_picker import DatePickerWidget
from ui.components.transaction_list import render_transaction_list
from utils.constants import TRANSACTION_TYPES

_ALL = "All"
_MAX_RENDERED_ROWS = 200


class HistoryTab(ctk.CTkFrame):
    def __init__(self, master, ledger_service: LedgerService, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._ledger = ledger_service

        self._type_var = ctk.StringVar(value=_ALL)
        self._category_var = ctk.StringVar(value=_ALL)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_filter_bar()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_filter_bar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkLabel(bar, text="Type:").grid(row=0, column=0, padx=(10, 4), pady=6)
        ctk.CTkSegmentedButton(
            bar,
            values=[_ALL] + TRANSACTION_TYPES,
            variable=self._type_var,
            command=lambda _: self._load(),
        ).grid(row=0, column=1, padx=4)

        ctk.CTkLabel(bar, text="Category:").grid(row=0, column=2, padx=(10, 4))
        ctk.CTkComboBox(
            bar,
            values=[_ALL] + all_categories(),
            variable=self._category_var,
            width=150, state="readonly",
            command=lambda _: self._load(),
        ).grid(row=0, column=3, padx=4)

        ctk.CTkLabel(bar, text="From:").grid(row=0, column=4, padx=(10, 4))
        self._from_picker = DatePickerWidget(bar)
        self._from_picker.grid(row=0, column=5, padx=4)
        self._from_picker.on_change(self._load)

        ctk.CTkLabel(bar, text="To:").grid(row=0, column=6, padx=(10, 4))
        self._to_picker = DatePickerWidget(bar)
        self._to_picker.grid(row=0, column=7, padx=4)
        self._to_picker.on_change(self._load)

        ctk.CTkButton(
            bar, text="Clear Filters", width=100,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._clear_filters,
        ).grid(row=0, column=8, padx=(10, 10))

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self, label_text="Transaction History")
        self._scroll.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)

    def _criteria(self) -> TransactionFilter:
        type_ = self._type_var.get()
        category = self._category_var.get()
        return TransactionFilter(
            type=None if type_ == _ALL else type_,
            category=None if category == _ALL else category,
            date_from=self._from_picker.get() or None,
            date_to=self._to_picker.get() or None,
        )

    def _load(self):
        rows = filter_transactions(self._ledger.transactions, self._criteria())
        render_transaction_list(
            self._scroll, rows[:_MAX_RENDERED_ROWS], "No matching transactions."
        )
        if len(rows) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self._scroll,
                text=f"Showing {_MAX_RENDERED_ROWS} of {len(rows)} transactions. Narrow the filters to see more.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).pack(pady=8)

    def _clear_filters(self):
        self._type_var.set(_ALL)
        self._category_var.set(_ALL)
        self._from_picker.set("")
        self._to_picker.set("")
        self._load()
