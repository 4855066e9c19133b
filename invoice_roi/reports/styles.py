from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet


def pdf_palette():
    return {
        "PRIMARY": colors.HexColor("#007BA7"),
        "BORDER": colors.HexColor("#D7DCE3"),
        "SOFT": colors.HexColor("#F5F7FA"),
        "OK": colors.HexColor("#22C55E"),
        "MUTED": colors.HexColor("#808080"),
    }


def pdf_styles():
    styles = getSampleStyleSheet()

    body = styles["BodyText"]
    body.fontName = "Helvetica"
    body.fontSize = 11
    body.leading = 14

    if "ReportTitle" not in styles.byName:
        styles.add(
            ParagraphStyle(
                name="ReportTitle",
                parent=styles["Title"],
                fontName="Helvetica-Bold",
                fontSize=24,
                leading=28,
                alignment=TA_CENTER,
                textColor=colors.white,
            )
        )
    if "CompanyLine" not in styles.byName:
        styles.add(
            ParagraphStyle(
                name="CompanyLine",
                parent=body,
                fontName="Helvetica-Bold",
                fontSize=16,
                leading=20,
            )
        )
    return styles
