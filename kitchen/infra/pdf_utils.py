import io
from typing import Any, Dict, List, Optional

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def _name(summary: Optional[Dict[str, Any]]) -> str:
    return summary["name"] if summary else "-"


def generate_pdf_for_week(overview: List[Dict[str, Any]]) -> bytes:
    """Render a week overview (see logic.planner.week.week_overview) as a PDF table."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    first, last = overview[0]["date"], overview[-1]["date"]
    elements = [
        Paragraph(f"Meal Plan {first.strftime('%b %d')} - {last.strftime('%b %d, %Y')}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Breakfast", "Lunch", "Dinner", "Snacks"]]
    for day in overview:
        data.append([
            day["date"].strftime("%A (%d.%m)"),
            _name(day["breakfast"]),
            _name(day["lunch"]),
            _name(day["dinner"]),
            ", ".join(s["name"] for s in day["snacks"]) or "-",
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
