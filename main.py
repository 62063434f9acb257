import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.kv_store import JsonFileKeyValueStore, SqliteKeyValueStore
from database.transaction_dao import TransactionDAO
from services.ledger_service import LedgerService
from ui.app_window import AppWindow
from utils.app_config import get_data_folder, get_log_level, get_storage_backend
from utils.logging_setup import configure_logging, get_logger


def main():
    # ── Bootstrap: read data folder, backend and log level from pre-DB config ─
    configure_logging(os.getenv("BUDGET_TRACKER_LOG_LEVEL") or get_log_level())
    log = get_logger("main")
    data_folder = get_data_folder()

    # ── Database (settings always live in sqlite) ────────────────────────────
    db = DatabaseManager.open_in_folder(data_folder)

    # ── Ledger store ─────────────────────────────────────────────────────────
    backend = get_storage_backend()
    if backend == "json":
        store = JsonFileKeyValueStore(data_folder or os.getcwd())
    else:
        store = SqliteKeyValueStore(db)
    log.info("using %s ledger store", backend)

    ledger_svc = LedgerService(TransactionDAO(store))
    ledger_svc.load()

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(db.get_setting("appearance_mode", "system"))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        ledger_service=ledger_svc,
        initial_tab=db.get_setting("last_tab", "Dashboard"),
    )

    def on_close():
        db.set_setting("last_tab", app.current_tab)
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
