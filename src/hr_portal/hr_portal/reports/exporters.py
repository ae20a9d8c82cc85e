from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def write_csv(rows: Sequence[Dict[str, Any]], path: Path) -> Path:
    # BOM so Excel opens Hebrew text correctly.
    pd.DataFrame(list(rows)).to_csv(path, index=False, encoding="utf-8-sig")
    return path


def write_xlsx(rows: Sequence[Dict[str, Any]], path: Path) -> Path:
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(list(rows)).to_excel(writer, index=False, sheet_name="Report")
    return path


def write_pdf(rows: Sequence[Dict[str, Any]], path: Path) -> Path:
    c = canvas.Canvas(str(path), pagesize=A4)
    width, height = A4
    margin = 50
    max_width = width - 2 * margin
    y = height - margin

    def draw(text: str, font: str, size: int, gap: int) -> None:
        nonlocal y
        for line in simpleSplit(text, font, size, max_width) or [""]:
            if y < margin:
                c.showPage()
                y = height - margin
            c.setFont(font, size)
            c.drawString(margin, y, line)
            y -= size + 3
        y -= gap

    headers = list(rows[0].keys())
    draw(", ".join(headers), "Helvetica-Bold", 12, 8)
    for row in rows:
        draw(", ".join(_cell_text(row.get(h)) for h in headers), "Helvetica", 10, 4)

    c.showPage()
    c.save()
    return path
