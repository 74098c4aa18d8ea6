"""
SpillPay GUI
- Split a bill proportionally to what each person ordered.
- A shared item is spread equally over everyone before the proportional split.
- Names are remembered between runs; orders are not.

Run:
  python spill_pay_gui.py [--data-dir PATH] [--no-cache] [--debug] [--log-file PATH]

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations
import argparse
import logging

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import MemorySlotStorage, SlotStorage
from logging_config import setup_logging
from store import ParticipantStore
from session import SplitSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spillpay", description="Split a bill by order size.")
    parser.add_argument("--data-dir", help="directory holding the cached names")
    parser.add_argument("--no-cache", action="store_true", help="do not read or write cached names")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def main(argv=None):
    """Main entry point for the application"""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )
    from main_app import SpillPayApp

    storage = MemorySlotStorage() if args.no_cache else SlotStorage(args.data_dir)
    store = ParticipantStore(storage)

    root = tk.Tk()
    SpillPayApp(root, store, SplitSession(store))
    root.mainloop()


if __name__ == "__main__":
    main()
