"""
Excel export functionality for SpillPay
"""
from __future__ import annotations

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from models import SplitOutcome


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F81BD")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def export_excel(outcome: SplitOutcome, filepath: str) -> None:
    """
    Export a confirmed split to Excel file with two sheets:
    - Split: one row per share plus a TOTAL row
    - Summary: total, shared item cost, participant count
    """
    wb = Workbook()
    wb.remove(wb.active)

    ws = wb.create_sheet("Split")
    ws.append(["Person", "Order", "Shared portion", "Share"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"

    shares = outcome.shares or []
    for s in shares:
        ws.append([s.label, s.participant.order, s.shared_portion, s.amount])

    if shares:
        last = ws.max_row
        ws.append(["TOTAL", f"=SUM(B2:B{last})", f"=SUM(C2:C{last})", f"=SUM(D2:D{last})"])
        for c in range(1, 5):
            ws.cell(ws.max_row, c).font = Font(bold=True)
    else:
        ws.append([outcome.message or ""])

    for r in range(2, ws.max_row + 1):
        for c in range(2, 5):
            ws.cell(r, c).number_format = "0.00"
    _autosize_columns(ws)

    ws = wb.create_sheet("Summary")
    ws.append(["Item", "Value"])
    _style_header(ws, 1)
    ws.append(["Total (with tax/tip)", outcome.total])
    ws.append(["Shared item cost", outcome.shared_item_cost])
    ws.append(["Participants", outcome.participant_count])
    ws.cell(2, 2).number_format = "0.00"
    ws.cell(3, 2).number_format = "0.00"
    _autosize_columns(ws)

    wb.save(filepath)
