import customtkinter as ctk

from models.account import ACCOUNT_LABELS, is_debt_account
from services.ledger_service import LedgerService
from services.net_worth_service import account_summary
from utils.constants import ACCOUNTS
from utils.currency import format_currency


class AccountsTab(ctk.CTkFrame):
    def __init__(self, master, ledger_service: LedgerService, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._ledger = ledger_service

        self.grid_columnconfigure(0, weight=1)
        self._build_headline()
        self._build_accounts()
        self._load()

    def refresh(self):
        self._load()

    def _build_headline(self):
        card = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        card.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))
        card.grid_columnconfigure((0, 1), weight=1)

        ctk.CTkLabel(card, text="Liquid Assets", text_color="gray60").grid(
            row=0, column=0, pady=(12, 0))
        ctk.CTkLabel(card, text="Net Worth", text_color="gray60").grid(
            row=0, column=1, pady=(12, 0))
        self._liquid_label = ctk.CTkLabel(card, text="", font=ctk.CTkFont(size=22, weight="bold"))
        self._liquid_label.grid(row=1, column=0, pady=(2, 12))
        self._net_worth_label = ctk.CTkLabel(card, text="", font=ctk.CTkFont(size=22, weight="bold"))
        self._net_worth_label.grid(row=1, column=1, pady=(2, 12))

    def _build_accounts(self):
        self._accounts_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._accounts_frame.grid(row=1, column=0, sticky="ew", padx=8, pady=8)
        self._accounts_frame.grid_columnconfigure(tuple(range(len(ACCOUNTS))), weight=1)

    def _load(self):
        summary = account_summary(self._ledger.transactions)

        self._liquid_label.configure(
            text=format_currency(summary.liquid_assets),
            text_color="#4CAF50" if summary.liquid_assets >= 0 else "#F44336",
        )
        self._net_worth_label.configure(
            text=format_currency(summary.net_worth),
            text_color="#4CAF50" if summary.net_worth >= 0 else "#F44336",
        )

        for w in self._accounts_frame.winfo_children():
            w.destroy()
        for col, name in enumerate(ACCOUNTS):
            balance = summary.balances[name]
            card = ctk.CTkFrame(self._accounts_frame, fg_color=("gray90", "gray20"), corner_radius=10)
            card.grid(row=0, column=col, padx=6, sticky="ew")
            card.grid_columnconfigure(0, weight=1)
            ctk.CTkLabel(card, text=ACCOUNT_LABELS.get(name, name), text_color="gray60").grid(
                row=0, column=0, pady=(12, 0), padx=16)
            ctk.CTkLabel(
                card, text=format_currency(balance),
                font=ctk.CTkFont(size=18, weight="bold"),
                text_color="#4CAF50" if balance >= 0 else "#F44336",
            ).grid(row=1, column=0, pady=(4, 0), padx=16)
            ctk.CTkLabel(
                card, text="Liability" if is_debt_account(name) else "Liquid",
                font=ctk.CTkFont(size=11), text_color="gray60",
            ).grid(row=2, column=0, pady=(0, 12), padx=16)
