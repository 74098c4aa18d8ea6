"""
Utility functions for SpillPay
"""
from __future__ import annotations
import math
import os
import sys
from typing import Optional, Union

from models import Share

APP_NAME = "SpillPay"


def safe_float(x: Union[str, float, int, None], default: Optional[float] = 0.0) -> Optional[float]:
    """Convert value to a finite float, returning default on error"""
    if isinstance(x, bool):
        return default
    try:
        v = float(x)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(v):
        return default
    return v


def parse_amount(text: Union[str, float, int, None]) -> Optional[float]:
    """Parse user-entered amount; None when the text is not (yet) a number"""
    if isinstance(text, str):
        text = text.strip()
        if not text:
            return None
    return safe_float(text, None)


def parse_total(text: Union[str, float, int, None]) -> Optional[float]:
    """Total must parse and be positive, otherwise no calculation happens"""
    v = parse_amount(text)
    if v is None or v <= 0:
        return None
    return v


def parse_shared_cost(text: Union[str, float, int, None]) -> float:
    """Shared item cost falls back to 0.0 when missing, unparsable or negative"""
    v = parse_amount(text)
    if v is None or v < 0:
        return 0.0
    return v


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def share_line(share: Share) -> str:
    """Display line for one share, e.g. 'Alice: $25.00'"""
    return f"{share.label}: {format_money(share.amount)}"


def order_text_fix(text: str, order: float) -> Optional[str]:
    """Text to show in an order field when it no longer matches the stored order, else None"""
    typed = parse_amount(text)
    if typed is None or typed == order:
        return None
    return f"{order:g}"


def app_dir(base: Optional[str] = None, create: bool = True) -> str:
    """
    Get application data directory, creating it if it doesn't exist (unless create is False).
    macOS: ~/Library/Application Support/SpillPay
    Windows: %APPDATA%/SpillPay
    Others: $XDG_CONFIG_HOME/SpillPay (default ~/.config/SpillPay)
    """
    if base is None:
        if sys.platform == "darwin":
            base = os.path.expanduser("~/Library/Application Support")
        elif sys.platform.startswith("win"):
            base = os.environ.get("APPDATA") or os.path.expanduser("~")
        else:
            base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
        path = os.path.join(base, APP_NAME)
    else:
        path = os.path.expanduser(base)
    if create:
        os.makedirs(path, exist_ok=True)
    return path
