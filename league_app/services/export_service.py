import io

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from league_app.models.league import Team

# column header -> x offset in cm
COLUMNS = [
    ("#", 1.5),
    ("Team", 2.5),
    ("P", 9.5),
    ("W", 10.5),
    ("D", 11.5),
    ("L", 12.5),
    ("GF", 13.5),
    ("GA", 14.5),
    ("GD", 15.5),
    ("Pts", 16.7),
    ("Form", 18.0),
]


def _row_values(position: int, team: Team):
    s = team.stats
    return [
        str(position), team.name, str(s.played), str(s.won), str(s.drawn), str(s.lost),
        str(s.goals_scored), str(s.goals_conceded), f"{s.goal_difference:+d}", str(s.points), s.form,
    ]


def _header(pdf, y):
    pdf.setFont("Helvetica-Bold", 10)
    for title, x in COLUMNS:
        pdf.drawString(x * cm, y, title)
    pdf.setFont("Helvetica", 10)


def standings_pdf(title: str, standings: list[Team]) -> io.BytesIO:
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    y = height - 2 * cm
    pdf.setFont("Helvetica-Bold", 16)
    pdf.drawCentredString(width / 2, y, title)
    y -= 30
    _header(pdf, y)
    y -= 18

    for position, team in enumerate(standings, start=1):
        if y < 2 * cm:
            pdf.showPage()
            y = height - 2 * cm
            _header(pdf, y)
            y -= 18
        for (_, x), value in zip(COLUMNS, _row_values(position, team)):
            pdf.drawString(x * cm, y, value[:32])
        y -= 15

    pdf.save()
    buffer.seek(0)
    return buffer
