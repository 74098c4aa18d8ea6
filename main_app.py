"""
Main application window for SpillPay GUI
"""
from __future__ import annotations
import colorsys
import csv
import logging
from typing import Dict, List, Optional

import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from models import SplitOutcome
from store import ParticipantStore
from session import SplitSession
from utils import order_text_fix, share_line
from excel_export import export_excel
from csv_handler import export_outcome_to_csv, import_names_from_csv

logger = logging.getLogger(__name__)


def _row_color(index: int, count: int, saturation: float = 0.3, value: float = 0.9) -> str:
    """Pastel color spread over the hue wheel by row position"""
    r, g, b = colorsys.hsv_to_rgb(index / max(count, 1), saturation, value)
    return f"#{int(r * 255):02x}{int(g * 255):02x}{int(b * 255):02x}"


class SpillPayApp(ttk.Frame):
    """Main application window"""

    def __init__(self, master: tk.Tk, store: ParticipantStore, session: Optional[SplitSession] = None):
        super().__init__(master, padding=8)
        self.master = master
        self.master.title("SpillPay")
        self.master.geometry("520x640")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        self.store = store
        self.session = session or SplitSession(store)
        # keep row variables alive while their widgets exist
        self._row_vars: List[Dict[str, tk.StringVar]] = []

        self._build_menu()
        self._build_ui()
        self.refresh_all()

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label="Import Names from CSV…", command=self.import_names_dialog)
        filem.add_separator()
        filem.add_command(label="Export CSV…", command=self.export_csv_dialog)
        filem.add_command(label="Export Excel…", command=self.export_excel_dialog)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)
        self.master.config(menu=menubar)

    # ---------- UI ----------
    def _build_ui(self):
        """Build shared item row, participant rows, total entry and results"""
        self.columnconfigure(0, weight=1)

        shared = tk.Frame(self, bg="#fff3b3", padx=5, pady=5)
        shared.grid(row=0, column=0, sticky="ew", pady=(0, 6))
        tk.Label(shared, text="Shared Item", bg="#fff3b3").pack(side="left")
        self.shared_var = tk.StringVar(value=self.session.shared_item_text)
        ttk.Entry(shared, textvariable=self.shared_var, width=12).pack(side="right")
        self.shared_var.trace_add("write", lambda *_: self._on_shared_changed())

        self.people_frame = ttk.Frame(self)
        self.people_frame.grid(row=1, column=0, sticky="nsew")
        self.people_frame.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        ttk.Button(self, text="Add Person", command=self.add_person).grid(row=2, column=0, sticky="w", pady=6)

        total = ttk.Frame(self)
        total.grid(row=3, column=0, sticky="ew", pady=(6, 0))
        ttk.Label(total, text="Total (with tax/tip):").pack(side="left")
        self.total_var = tk.StringVar(value=self.session.total_text)
        total_entry = ttk.Entry(total, textvariable=self.total_var, width=14)
        total_entry.pack(side="left", padx=4)
        total_entry.bind("<Return>", self._on_total_submit)
        total_entry.bind("<KP_Enter>", self._on_total_submit)
        self.total_var.trace_add("write", lambda *_: self._on_total_changed())

        ttk.Button(self, text="Confirm Total", command=self.confirm_total).grid(row=4, column=0, pady=6)

        self.result_note = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.result_note, foreground="gray").grid(row=5, column=0, sticky="w")
        self.result_list = tk.Listbox(self, height=8)
        self.result_list.grid(row=6, column=0, sticky="nsew")

    def _build_person_row(self, index: int, count: int, pid: str, name: str, order: float):
        """One row: name entry, order entry, delete button"""
        color = _row_color(index, count)
        row = tk.Frame(self.people_frame, bg=color, padx=5, pady=5)
        row.grid(row=index, column=0, sticky="ew", pady=2)
        row.columnconfigure(0, weight=1)

        name_var = tk.StringVar(value=name)
        order_var = tk.StringVar(value=f"{order:g}")
        ttk.Entry(row, textvariable=name_var).grid(row=0, column=0, sticky="ew")
        ttk.Entry(row, textvariable=order_var, width=10).grid(row=0, column=1, padx=4)
        tk.Button(row, text="✕", fg="red", bg=color, relief="flat",
                  command=lambda: self.remove_person(pid)).grid(row=0, column=2)

        name_var.trace_add("write", lambda *_: self._on_name_changed(pid, name_var))
        order_var.trace_add("write", lambda *_: self._on_order_changed(pid, order_var))
        self._row_vars.append({"name": name_var, "order": order_var})

    # ---------- Events ----------
    def _on_name_changed(self, pid: str, var: tk.StringVar):
        self.store.update_name(pid, var.get())
        self.refresh_result()

    def _on_order_changed(self, pid: str, var: tk.StringVar):
        if self.store.update_order(pid, var.get()):
            fixed = order_text_fix(var.get(), self.store.get(pid).order)
            if fixed is not None:
                var.set(fixed)
            self.refresh_result()

    def _on_shared_changed(self):
        self.session.set_shared_item_text(self.shared_var.get())
        self.refresh_result()

    def _on_total_changed(self):
        self.session.set_total_text(self.total_var.get())
        self.refresh_result()

    def _on_total_submit(self, event=None):
        self.confirm_total()
        return "break"

    # ---------- Actions ----------
    def add_person(self):
        self.store.add_participant()
        self.refresh_people()

    def remove_person(self, pid: str):
        self.store.remove_participant(pid)
        self.refresh_all()

    def confirm_total(self):
        # drop keyboard focus from the entry
        self.master.focus_set()
        self.session.confirm()
        self.refresh_result()

    # ---------- Refresh ----------
    def refresh_all(self):
        """Refresh all UI elements"""
        self.refresh_people()
        self.refresh_result()

    def refresh_people(self):
        """Rebuild one row per participant"""
        for child in self.people_frame.winfo_children():
            child.destroy()
        self._row_vars = []
        people = list(self.store)
        for i, p in enumerate(people):
            self._build_person_row(i, len(people), p.id, p.name, p.order)

    def refresh_result(self):
        """Show shares, the no-distribution message, or nothing"""
        self.result_list.delete(0, tk.END)
        outcome = self.session.outcome()
        if outcome is None:
            self.result_note.set("")
            return
        if not outcome.has_distribution:
            self.result_note.set(outcome.message)
            return
        self.result_note.set("")
        count = len(outcome.shares)
        for i, s in enumerate(outcome.shares):
            self.result_list.insert(tk.END, share_line(s))
            self.result_list.itemconfig(i, background=_row_color(i, count, 0.2, 0.95))

    # ---------- CSV / Excel ----------
    def _confirmed_outcome(self, title: str) -> Optional[SplitOutcome]:
        outcome = self.session.outcome()
        if outcome is None or not outcome.has_distribution:
            messagebox.showinfo(title, "Confirm a total with at least one non-zero order first.")
            return None
        return outcome

    def export_csv_dialog(self):
        """Export the confirmed split to CSV file"""
        outcome = self._confirmed_outcome("Export CSV")
        if outcome is None:
            return
        fp = filedialog.asksaveasfilename(
            title="Export Split to CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return
        try:
            export_outcome_to_csv(outcome, fp)
            messagebox.showinfo("Export CSV", f"Exported {len(outcome.shares)} shares to:\n{fp}")
        except OSError as ex:
            logger.exception("CSV export failed")
            messagebox.showerror("Export failed", str(ex))

    def export_excel_dialog(self):
        """Export the confirmed split to Excel file"""
        outcome = self._confirmed_outcome("Export Excel")
        if outcome is None:
            return
        fp = filedialog.asksaveasfilename(
            title="Export Excel",
            defaultextension=".xlsx",
            filetypes=[("Excel Workbook", "*.xlsx")]
        )
        if not fp:
            return
        try:
            export_excel(outcome, fp)
            messagebox.showinfo("Export", f"Exported: {fp}")
        except OSError as ex:
            logger.exception("Excel export failed")
            messagebox.showerror("Export failed", str(ex))

    def import_names_dialog(self):
        """Replace participants with names read from a CSV file"""
        fp = filedialog.askopenfilename(
            title="Import Names from CSV",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return
        try:
            names = import_names_from_csv(fp)
        except (OSError, UnicodeDecodeError, csv.Error) as ex:
            messagebox.showerror("Import failed", str(ex))
            return
        if not names:
            messagebox.showinfo("Import CSV", "No names found in CSV file.")
            return
        if not messagebox.askyesno("Import CSV", f"Replace current people with {len(names)} names?"):
            return
        self.store.replace_names(names)
        self.refresh_all()
