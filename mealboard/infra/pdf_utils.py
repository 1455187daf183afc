import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealboard.logic.calendar.view import CalendarView


def generate_pdf_for_week(view: CalendarView) -> bytes:
    """Generate a simple PDF table: Day / Menus / Time / Serves for the visible week."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Calendar - {view.label}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Menus", "Time", "Serves"]]
    for cell in view.day_cells():
        entries = cell["entries"]
        day = cell["date"]
        data.append([
            f"{cell['weekday']} {day:%B} {day.day}",
            ", ".join(e.menu.name for e in entries) or "-",
            f"{sum(e.menu.total_minutes for e in entries)} min" if entries else "",
            ", ".join(str(e.menu.servings or "?") for e in entries),
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#3B82F6")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
