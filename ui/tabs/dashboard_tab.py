import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from models.summary import DashboardSummary
from services.ledger_service import LedgerService
from services.report_service import dashboard_summary
from ui.components.transaction_list import render_transaction_list
from utils.currency import format_currency
from utils.date_helpers import friendly_month, today


class DashboardTab(ctk.CTkFrame):
    def __init__(self, master, ledger_service: LedgerService, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._ledger = ledger_service

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_header()
        self._build_summary_cards()
        self._build_bottom_section()
        self._load()

    def refresh(self):
        self._load()

    def _build_header(self):
        self._month_label = ctk.CTkLabel(
            self, text="", font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        )
        self._month_label.grid(row=0, column=0, sticky="ew", padx=16, pady=(12, 0))

    def _build_summary_cards(self):
        self._card_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._card_frame.grid(row=1, column=0, sticky="ew", padx=16, pady=12)
        self._card_frame.grid_columnconfigure((0, 1, 2, 3), weight=1)

    def _build_bottom_section(self):
        bottom = ctk.CTkFrame(self, fg_color="transparent")
        bottom.grid(row=2, column=0, sticky="nsew", padx=16, pady=(0, 12))
        bottom.grid_columnconfigure(0, weight=1)
        bottom.grid_columnconfigure(1, weight=1)
        bottom.grid_rowconfigure(0, weight=1)

        self._recent_frame = ctk.CTkScrollableFrame(
            bottom, label_text="Recent Transactions", height=240
        )
        self._recent_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 8))

        chart_outer = ctk.CTkFrame(bottom, fg_color=("gray90", "gray20"), corner_radius=8)
        chart_outer.grid(row=0, column=1, sticky="nsew", padx=(8, 0))
        ctk.CTkLabel(
            chart_outer, text="Expenses by Category (This Month)",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        self._chart_fig = Figure(figsize=(4.5, 2.8), dpi=80, tight_layout=True)
        self._chart_ax = self._chart_fig.add_subplot(111)
        self._chart_mpl = FigureCanvasTkAgg(self._chart_fig, master=chart_outer)
        self._chart_mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 8))

    def _load(self):
        as_of = today()
        summary = dashboard_summary(self._ledger.transactions, as_of)
        self._month_label.configure(text=friendly_month(as_of))

        for w in self._card_frame.winfo_children():
            w.destroy()
        card_data = [
            ("Total Balance",    summary.total_balance,    "#2196F3" if summary.total_balance >= 0 else "#FF9800"),
            ("Monthly Income",   summary.monthly_income,   "#4CAF50"),
            ("Monthly Expenses", summary.monthly_expenses, "#F44336"),
            ("Total Assets",     summary.total_assets,     "#009688"),
        ]
        for i, (label, value, color) in enumerate(card_data):
            self._make_card(self._card_frame, i, label, value, color)

        render_transaction_list(self._recent_frame, summary.recent, "No transactions yet.")
        self._draw_chart(summary)

    def _draw_chart(self, summary: DashboardSummary):
        ax = self._chart_ax
        ax.clear()
        rows = summary.expenses_by_category
        if not rows:
            ax.text(0.5, 0.5, "No expenses this month", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            ax.set_axis_off()
            self._chart_mpl.draw_idle()
            return

        ax.set_axis_on()
        labels = [r.category for r in rows]
        x = list(range(len(labels)))
        ax.bar(x, [r.total for r in rows], color=[r.color_hex for r in rows])
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=30, ha="right")
        ax.yaxis.set_major_formatter(
            lambda v, _: f"{v/1_000_000:.1f}M" if abs(v) >= 1_000_000
            else (f"{v/1000:.0f}k" if abs(v) >= 1000 else f"{v:.0f}")
        )
        self._chart_mpl.draw_idle()

    def _make_card(self, parent, col, label, value, color):
        card = ctk.CTkFrame(parent, fg_color=("gray90", "gray20"), corner_radius=10)
        card.grid(row=0, column=col, padx=6, sticky="ew")
        card.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(
            card, text=label, font=ctk.CTkFont(size=12),
            text_color="gray60",
        ).grid(row=0, column=0, pady=(12, 0), padx=16)
        ctk.CTkLabel(
            card,
            text=format_currency(value),
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=color,
        ).grid(row=1, column=0, pady=(4, 12), padx=16)
