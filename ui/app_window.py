import customtkinter as ctk

from services.ledger_service import LedgerService
from ui.components.alert_banner import AlertBanner
from ui.tabs.accounts_tab import AccountsTab
from ui.tabs.dashboard_tab import DashboardTab
from ui.tabs.history_tab import HistoryTab
from ui.tabs.transaction_tab import TransactionTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT

TAB_NAMES = ["Dashboard", "Add Transaction", "History", "Accounts"]


class AppWindow(ctk.CTk):
    def __init__(self, ledger_service: LedgerService, initial_tab: str = "Dashboard", **kwargs):
        super().__init__(**kwargs)
        self._ledger = ledger_service

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_banner_area()
        self._build_tabs()
        if initial_tab in TAB_NAMES:
            self._tabview.set(initial_tab)

    @property
    def current_tab(self) -> str:
        return self._tabview.get()

    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=0, column=0, sticky="ew", padx=8)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in TAB_NAMES:
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._tabs = {
            "Dashboard": DashboardTab(self._tabview.tab("Dashboard"), ledger_service=self._ledger),
            "Add Transaction": TransactionTab(
                self._tabview.tab("Add Transaction"),
                ledger_service=self._ledger,
                on_saved=self._on_transaction_saved,
            ),
            "History": HistoryTab(self._tabview.tab("History"), ledger_service=self._ledger),
            "Accounts": AccountsTab(self._tabview.tab("Accounts"), ledger_service=self._ledger),
        }
        for tab in self._tabs.values():
            tab.grid(row=0, column=0, sticky="nsew")

    def notify_tabs_refresh(self):
        for tab in self._tabs.values():
            tab.refresh()

    def _on_transaction_saved(self, saved_ok: bool):
        self.notify_tabs_refresh()
        if saved_ok:
            self.show_notification("Transaction added!", "success")
        else:
            self.show_notification(
                "Transaction added, but it could not be saved to disk.", "warning"
            )

    def show_notification(self, message: str, kind: str = "success"):
        banner = AlertBanner(self._banner_frame, message=message, kind=kind)
        banner.pack(fill="x", pady=2)
