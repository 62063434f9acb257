import customtkinter as ctk

from services.category_service import categories_for, is_known_account, is_valid_category
from services.ledger_service import LedgerService
from ui.components.date_picker import DatePickerWidget
from utils.constants import ACCOUNTS, TRANSACTION_TYPES
from utils.currency import parse_amount


class TransactionTab(ctk.CTkFrame):
    """Add an income or expense. Input is validated here before reaching the ledger."""

    def __init__(self, master, ledger_service: LedgerService, on_saved, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._ledger = ledger_service
        self._on_saved = on_saved   # callable(saved_ok: bool)

        self._type_var = ctk.StringVar(value="")
        self._category_var = ctk.StringVar(value="")
        self._amount_var = ctk.StringVar()
        self._account_var = ctk.StringVar(value=ACCOUNTS[0])
        self._desc_var = ctk.StringVar()
        self._error_var = ctk.StringVar()

        self.grid_columnconfigure(0, weight=1)
        self._form = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=10)
        self._form.grid(row=0, column=0, padx=16, pady=16, sticky="n")
        self._form.grid_columnconfigure(1, weight=1)
        self._build_form()
        self._reset()

    def refresh(self):
        pass

    def _label(self, text, row):
        ctk.CTkLabel(self._form, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=6, sticky="ne"
        )

    def _build_form(self):
        r = 0
        self._label("Type:", r)
        type_frame = ctk.CTkFrame(self._form, fg_color="transparent")
        type_frame.grid(row=r, column=1, padx=(0, 16), pady=6, sticky="w")
        for t in TRANSACTION_TYPES:
            ctk.CTkRadioButton(
                type_frame, text=t.title(),
                variable=self._type_var, value=t,
                command=self._update_category_options,
            ).pack(side="left", padx=4)
        r += 1

        self._label("Category:", r)
        self._category_group = ctk.CTkFrame(self._form, fg_color="transparent")
        self._category_group.grid(row=r, column=1, padx=(0, 16), pady=6, sticky="w")
        r += 1

        self._label("Amount:", r)
        ctk.CTkEntry(self._form, textvariable=self._amount_var, width=220).grid(
            row=r, column=1, padx=(0, 16), pady=6, sticky="w"
        )
        r += 1

        self._label("Account:", r)
        ctk.CTkComboBox(
            self._form, values=list(ACCOUNTS), variable=self._account_var,
            width=220, state="readonly",
        ).grid(row=r, column=1, padx=(0, 16), pady=6, sticky="w")
        r += 1

        self._label("Description:", r)
        ctk.CTkEntry(self._form, textvariable=self._desc_var, width=320).grid(
            row=r, column=1, padx=(0, 16), pady=6, sticky="ew"
        )
        r += 1

        self._label("Date:", r)
        self._date_picker = DatePickerWidget(self._form)
        self._date_picker.grid(row=r, column=1, padx=(0, 16), pady=6, sticky="w")
        r += 1

        ctk.CTkLabel(
            self._form, textvariable=self._error_var,
            text_color="#F44336", wraplength=360, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        ctk.CTkButton(
            self._form, text="Add Transaction", width=140, command=self._on_save,
        ).grid(row=r, column=1, padx=(0, 16), pady=(4, 16), sticky="e")

    def _update_category_options(self):
        for w in self._category_group.winfo_children():
            w.destroy()
        self._category_var.set("")
        type_ = self._type_var.get()
        if not type_:
            ctk.CTkLabel(
                self._category_group, text="Choose a transaction type first.",
                text_color="gray60", font=ctk.CTkFont(size=11),
            ).grid(row=0, column=0, sticky="w")
            return
        for i, name in enumerate(categories_for(type_)):
            ctk.CTkRadioButton(
                self._category_group, text=name,
                variable=self._category_var, value=name,
            ).grid(row=i // 4, column=i % 4, padx=4, pady=2, sticky="w")

    def _reset(self):
        self._type_var.set("")
        self._amount_var.set("")
        self._account_var.set(ACCOUNTS[0])
        self._desc_var.set("")
        self._error_var.set("")
        self._date_picker.set_today()
        self._update_category_options()

    def _on_save(self):
        type_ = self._type_var.get()
        if type_ not in TRANSACTION_TYPES:
            self._error_var.set("Please choose a transaction type.")
            return
        category = self._category_var.get()
        if not is_valid_category(type_, category):
            self._error_var.set("Please choose a category.")
            return
        account = self._account_var.get()
        if not is_known_account(account):
            self._error_var.set("Please choose an account.")
            return
        try:
            amount = parse_amount(self._amount_var.get())
        except ValueError as e:
            self._error_var.set(str(e))
            return
        if not self._date_picker.is_valid():
            self._error_var.set("Invalid date. Use YYYY-MM-DD.")
            return

        self._ledger.record(
            type_=type_,
            amount=amount,
            category=category,
            account=account,
            date=self._date_picker.get(),
            description=self._desc_var.get().strip(),
        )
        self._reset()
        self._on_saved(self._ledger.last_save_ok)
