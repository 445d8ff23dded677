"""Render a finished analysis as a downloadable PDF report.

Three parts: the overall score with the weighted breakdown and key metrics,
the keyword and skills detail, then the prioritized recommendations.
"""

import io
import logging
from datetime import datetime
from xml.sax.saxutils import escape

from reportlab.graphics.shapes import Drawing, Rect
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from models.responses import AnalysisResponse

logger = logging.getLogger(__name__)

PRIMARY = colors.HexColor("#2563EB")
SUCCESS = colors.HexColor("#10B981")
WARNING = colors.HexColor("#F59E0B")
DANGER = colors.HexColor("#EF4444")
MUTED = colors.HexColor("#6B7280")
TEXT = colors.HexColor("#1F2937")
BAR_BACKGROUND = colors.HexColor("#E5E7EB")

MARGIN = 50
BAR_WIDTH = 150
BAR_HEIGHT = 8

MAX_LISTED_KEYWORDS = 30
MAX_LISTED_MATCHED_SKILLS = 20
MAX_LISTED_MISSING_SKILLS = 15

PRIORITY_COLORS = {"high": DANGER, "medium": WARNING, "low": SUCCESS}

FOOTER_TEXT = "Generated by ATS Resume Scorer"


def score_color(score: int) -> colors.Color:
    if score >= 70:
        return SUCCESS
    if score >= 40:
        return WARNING
    return DANGER


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("ReportTitle", parent=base["Title"], fontSize=24, leading=30, textColor=PRIMARY),
        "subtitle": ParagraphStyle("Subtitle", parent=base["Normal"], fontSize=10, textColor=MUTED, alignment=TA_CENTER),
        "center": ParagraphStyle("Center", parent=base["Normal"], fontSize=16, leading=20, textColor=TEXT, alignment=TA_CENTER),
        "heading": ParagraphStyle("Heading", parent=base["Heading2"], fontSize=18, leading=22, textColor=PRIMARY),
        "subheading": ParagraphStyle("Subheading", parent=base["Heading3"], fontSize=14, leading=18),
        "body": ParagraphStyle("Body", parent=base["Normal"], fontSize=10, leading=13, textColor=TEXT),
        "muted": ParagraphStyle("Muted", parent=base["Normal"], fontSize=10, leading=13, textColor=MUTED),
    }


def _format_timestamp(timestamp: str) -> str:
    try:
        return datetime.fromisoformat(timestamp).strftime("%Y-%m-%d %H:%M %Z").strip()
    except ValueError:
        return timestamp or "unknown"


def _score_bar(score: int) -> Drawing:
    drawing = Drawing(BAR_WIDTH, BAR_HEIGHT)
    drawing.add(Rect(0, 0, BAR_WIDTH, BAR_HEIGHT, fillColor=BAR_BACKGROUND, strokeColor=None))
    drawing.add(Rect(0, 0, BAR_WIDTH * score / 100, BAR_HEIGHT, fillColor=score_color(score), strokeColor=None))
    return drawing


def _summary_page(data: AnalysisResponse, styles: dict[str, ParagraphStyle]) -> list:
    big_score = ParagraphStyle(
        "Score", parent=styles["center"], fontSize=48, leading=56, textColor=score_color(data.overall_score)
    )
    story = [
        Paragraph("ATS Resume Score Report", styles["title"]),
        Paragraph(f"Generated: {escape(_format_timestamp(data.timestamp))}", styles["subtitle"]),
        Spacer(1, 24),
        Paragraph("Overall ATS Compatibility Score", styles["center"]),
        Paragraph(f"{data.overall_score}/100", big_score),
        Paragraph(f"Grade: {data.score_grade}", styles["subtitle"]),
        Spacer(1, 24),
        Paragraph("Score Breakdown", styles["heading"]),
    ]

    b = data.score_breakdown
    rows = []
    for name, entry in (
        ("Keyword Match", b.keyword_match),
        ("Skills Alignment", b.skills_alignment),
        ("Experience Relevance", b.experience_relevance),
        ("Education Match", b.education_match),
        ("Format & Readability", b.format_readability),
    ):
        rows.append([name, f"{entry.score}/100", f"({entry.weight}% weight)", _score_bar(entry.score)])
    table = Table(rows, colWidths=[170, 60, 90, BAR_WIDTH + 10], rowHeights=24)
    style = [
        ("FONTSIZE", (0, 0), (-1, -1), 11),
        ("TEXTCOLOR", (0, 0), (0, -1), TEXT),
        ("TEXTCOLOR", (2, 0), (2, -1), MUTED),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    for i, entry in enumerate(
        (b.keyword_match, b.skills_alignment, b.experience_relevance, b.education_match, b.format_readability)
    ):
        style.append(("TEXTCOLOR", (1, i), (1, i), score_color(entry.score)))
    table.setStyle(TableStyle(style))
    story += [table, Spacer(1, 18), Paragraph("Key Metrics", styles["heading"])]

    m = data.metrics
    metrics = [
        ("Keywords Matched", m.keywords_matched),
        ("Keywords Missing", m.keywords_missing),
        ("Match Rate", f"{m.match_rate}%"),
        ("Skills Coverage", f"{m.skills_coverage}%"),
        ("Action Verbs Count", m.action_verbs_count),
        ("Quantifiable Achievements", m.quantifiable_achievements),
        ("Resume Length (words)", m.resume_length.words),
        ("Estimated Pages", m.resume_length.pages),
    ]
    # Two label/value pairs per row
    metric_rows = [
        [metrics[i][0], str(metrics[i][1]), metrics[i + 1][0], str(metrics[i + 1][1])]
        for i in range(0, len(metrics), 2)
    ]
    metric_table = Table(metric_rows, colWidths=[150, 100, 150, 100])
    metric_table.setStyle(TableStyle([
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("TEXTCOLOR", (0, 0), (0, -1), MUTED),
        ("TEXTCOLOR", (2, 0), (2, -1), MUTED),
        ("TEXTCOLOR", (1, 0), (1, -1), TEXT),
        ("TEXTCOLOR", (3, 0), (3, -1), TEXT),
    ]))
    story.append(metric_table)
    return story


def _keyword_page(data: AnalysisResponse, styles: dict[str, ParagraphStyle]) -> list:
    matched = data.keyword_analysis.matched
    missing = data.keyword_analysis.missing
    story = [
        Paragraph("Keyword Analysis", styles["heading"]),
        Paragraph(
            f"Matched Keywords ({len(matched)})",
            ParagraphStyle("Matched", parent=styles["subheading"], textColor=SUCCESS),
        ),
        Paragraph(escape(", ".join(matched[:MAX_LISTED_KEYWORDS]) or "None"), styles["body"]),
        Spacer(1, 12),
        Paragraph(
            f"Missing Keywords ({len(missing)})",
            ParagraphStyle("Missing", parent=styles["subheading"], textColor=DANGER),
        ),
        Paragraph(escape(", ".join(missing[:MAX_LISTED_KEYWORDS]) or "None"), styles["body"]),
        Spacer(1, 24),
    ]

    skills = data.skills_analysis
    story += [
        Paragraph("Skills Analysis", styles["heading"]),
        Paragraph(f"Total Skills Found: {skills.total_resume_skills}", styles["body"]),
        Paragraph(f"Skills Matched: {len(skills.matched)}", styles["body"]),
        Paragraph(f"Skills Coverage: {data.metrics.skills_coverage}%", styles["body"]),
        Spacer(1, 12),
    ]
    if skills.matched:
        story += [
            Paragraph("Matched Skills:", ParagraphStyle("MatchedSkills", parent=styles["body"], textColor=SUCCESS)),
            Paragraph(
                escape(", ".join(s.skill for s in skills.matched[:MAX_LISTED_MATCHED_SKILLS])), styles["body"]
            ),
            Spacer(1, 12),
        ]
    if skills.missing:
        story += [
            Paragraph("Missing Skills:", ParagraphStyle("MissingSkills", parent=styles["body"], textColor=WARNING)),
            Paragraph(
                escape(", ".join(s.skill for s in skills.missing[:MAX_LISTED_MISSING_SKILLS])), styles["body"]
            ),
        ]
    return story


def _recommendation_page(data: AnalysisResponse, styles: dict[str, ParagraphStyle]) -> list:
    story = [Paragraph("Recommendations for Improvement", styles["heading"]), Spacer(1, 12)]
    if not data.recommendations:
        story.append(Paragraph("No specific recommendations - your resume looks great!", styles["muted"]))
        return story

    for index, rec in enumerate(data.recommendations, start=1):
        title_style = ParagraphStyle(
            f"Rec{index}", parent=styles["body"], fontSize=12, leading=15, textColor=PRIORITY_COLORS[rec.priority]
        )
        story += [
            Paragraph(f"{index}. [{rec.priority.upper()}] {escape(rec.title)}", title_style),
            Paragraph(f"Category: {escape(rec.category)}", styles["muted"]),
            Paragraph(escape(rec.description), styles["body"]),
            Paragraph(f"Action: {escape(rec.action)}", styles["muted"]),
            Spacer(1, 12),
        ]
    return story


def _draw_footer(canvas, doc) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.HexColor("#9CA3AF"))
    canvas.drawCentredString(LETTER[0] / 2, MARGIN / 2, FOOTER_TEXT)
    canvas.restoreState()


def generate_pdf(data: AnalysisResponse) -> bytes:
    """Render an analysis to a US Letter PDF and return the file bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=LETTER,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=MARGIN,
        title="ATS Resume Score Report",
    )
    styles = _styles()
    story = (
        _summary_page(data, styles)
        + [PageBreak()]
        + _keyword_page(data, styles)
        + [PageBreak()]
        + _recommendation_page(data, styles)
    )
    doc.build(story, onFirstPage=_draw_footer, onLaterPages=_draw_footer)

    pdf = buf.getvalue()
    logger.info("Report generated: %d bytes (score %d/100)", len(pdf), data.overall_score)
    return pdf
