from __future__ import annotations

from typing import Any, Dict, List

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Table, TableStyle


def title_bar(text: str, style: ParagraphStyle, pal: Dict[str, Any], content_w: float) -> Table:
    """Full-width coloured banner carrying the report title."""
    t = Table([[Paragraph(text, style)]], colWidths=[content_w])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["PRIMARY"]),
        ("TOPPADDING", (0, 0), (-1, -1), 14),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 14),
    ]))
    return t


def section_bar(text: str, pal: Dict[str, Any], content_w: float) -> Table:
    style = ParagraphStyle(
        name="section_bar",
        fontName="Helvetica-Bold",
        fontSize=13,
        leading=16,
        textColor=colors.white,
        leftIndent=6,
    )
    t = Table([[Paragraph(text, style)]], colWidths=[content_w])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["PRIMARY"]),
        ("LEFTPADDING", (0, 0), (-1, -1), 6),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]))
    return t


def label_value_table(
    rows: List[List[str]],
    content_w: float,
    pal: Dict[str, Any],
    *,
    highlight_row: int | None = None,
    font_size: int = 11,
) -> Table:
    """Two columns: bold label on the left, right-aligned value."""
    t = Table(rows, colWidths=[content_w * 0.6, content_w * 0.4])
    t.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("FONTNAME", (1, 0), (1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -1), 0.6, pal["BORDER"]),
        ("BACKGROUND", (0, 0), (-1, -1), pal["SOFT"]),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    if highlight_row is not None:
        t.setStyle(TableStyle([
            ("BACKGROUND", (0, highlight_row), (-1, highlight_row), pal["OK"]),
            ("TEXTCOLOR", (0, highlight_row), (-1, highlight_row), colors.white),
        ]))
    return t
