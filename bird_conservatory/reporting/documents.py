"""
Bird Conservatory — Document Export
Word and Excel reports of enclosures, the bird index, and food requirements.
"""

from typing import List, Sequence
import logging
import os

from docx import Document
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.oxml import OxmlElement
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from ..core.bird import Food
from ..core.directory import AllocationDirectory
from ..core.resources import ResourceAggregator
from ..config import ReportConfig, REPORT

logger = logging.getLogger(__name__)


ENCLOSURE_HEADERS = ["Enclosure", "Location", "Classification", "Occupancy", "Residents"]
INDEX_HEADERS = ["Bird", "Classification", "Enclosure", "Location"]
FOOD_HEADERS = ["Food", "Units"]


# =============================================================================
# TABLE ROWS
# =============================================================================

def enclosure_rows(directory: AllocationDirectory) -> List[List]:
    rows = []
    for enclosure in directory.enclosures:
        classification = enclosure.classification()
        rows.append([
            enclosure.enclosure_id,
            enclosure.location,
            classification.display_name if classification else "",
            f"{enclosure.occupancy}/{enclosure.capacity}",
            ", ".join(bird.display_name for bird in enclosure.residents),
        ])
    return rows


def index_rows(directory: AllocationDirectory) -> List[List]:
    rows = [
        [bird.display_name, bird.classification.display_name, enclosure.enclosure_id, enclosure.location]
        for enclosure in directory.enclosures
        for bird in enclosure.residents
    ]
    rows.sort(key=lambda row: row[0])
    return rows


def food_rows(directory: AllocationDirectory) -> List[List]:
    totals = ResourceAggregator().consumption_totals(directory)
    return [[food.display_name, totals[food]] for food in Food if food in totals]


# =============================================================================
# WORD
# =============================================================================

def shade_header_cell(cell, text: str, config: ReportConfig = REPORT):
    """Write a bold header label on the configured fill colour."""
    cell.text = text
    run = cell.paragraphs[0].runs[0]
    run.bold = True
    run.font.color.rgb = RGBColor.from_string(config.header_font_color)

    fill = OxmlElement('w:shd')
    fill.set(qn('w:val'), 'clear')
    fill.set(qn('w:fill'), config.header_color)
    cell._tc.get_or_add_tcPr().append(fill)


def add_report_table(doc, headers: Sequence[str], rows: Sequence[Sequence],
                     config: ReportConfig = REPORT):
    """Append a gridded table; numeric cells are right-aligned."""
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = 'Table Grid'

    for cell, text in zip(table.rows[0].cells, headers):
        shade_header_cell(cell, text, config)

    for values in rows:
        cells = table.add_row().cells
        for cell, value in zip(cells, values):
            cell.text = str(value)
            if isinstance(value, int):
                cell.paragraphs[0].alignment = WD_ALIGN_PARAGRAPH.RIGHT

    return table


def export_docx(directory: AllocationDirectory, path: str, config: ReportConfig = REPORT) -> str:
    """Write the conservatory report as a Word document. Returns the path."""
    doc = Document()

    title = doc.add_heading(config.title, 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    status = directory.get_status()
    summary = doc.add_paragraph()
    summary.alignment = WD_ALIGN_PARAGRAPH.CENTER
    summary.add_run(
        f"{status['housed']} birds housed in {status['enclosures']} of "
        f"{status['max_enclosures']} enclosures"
    ).font.size = Pt(12)
    if status["awaiting_assignment"]:
        summary.add_run(f"\n{status['awaiting_assignment']} awaiting assignment").italic = True

    doc.add_heading(config.map_title.title(), level=1)
    rows = enclosure_rows(directory)
    if rows:
        add_report_table(doc, ENCLOSURE_HEADERS, rows, config)
    else:
        doc.add_paragraph("No enclosures have been created yet.")

    doc.add_heading("Bird Index", level=1)
    rows = index_rows(directory)
    if rows:
        add_report_table(doc, INDEX_HEADERS, rows, config)
    else:
        doc.add_paragraph("No birds are currently housed in the conservatory.")

    doc.add_heading(config.food_title.title(), level=1)
    rows = food_rows(directory)
    if rows:
        add_report_table(doc, FOOD_HEADERS, rows, config)
    else:
        doc.add_paragraph("No food is currently required.")

    doc.save(path)
    logger.info(f"Created: {path}")
    return path


# =============================================================================
# EXCEL
# =============================================================================

def _write_sheet(ws, headers: Sequence[str], rows: Sequence[Sequence], config: ReportConfig):
    header_fill = PatternFill(start_color=config.header_color, end_color=config.header_color, fill_type="solid")
    header_font = Font(bold=True, color=config.header_font_color)
    thin_border = Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )

    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.border = thin_border

    for row_idx, row_data in enumerate(rows, 2):
        for col_idx, value in enumerate(row_data, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            cell.border = thin_border

    # Set column widths
    for col, header in enumerate(headers, 1):
        longest = max([len(str(header))] + [len(str(row[col - 1])) for row in rows])
        ws.column_dimensions[get_column_letter(col)].width = min(60, longest + 2)


def export_workbook(directory: AllocationDirectory, path: str, config: ReportConfig = REPORT) -> str:
    """Write the conservatory report as an Excel workbook. Returns the path."""
    wb = Workbook()

    ws1 = wb.active
    ws1.title = "Enclosures"
    _write_sheet(ws1, ENCLOSURE_HEADERS, enclosure_rows(directory), config)

    ws2 = wb.create_sheet("Bird Index")
    _write_sheet(ws2, INDEX_HEADERS, index_rows(directory), config)

    ws3 = wb.create_sheet("Food Requirements")
    _write_sheet(ws3, FOOD_HEADERS, food_rows(directory), config)

    wb.save(path)
    logger.info(f"Created: {path}")
    return path


def export_all(directory: AllocationDirectory, output_dir: str, config: ReportConfig = REPORT) -> List[str]:
    """Write both reports into a directory."""
    os.makedirs(output_dir, exist_ok=True)
    return [
        export_docx(directory, os.path.join(output_dir, config.docx_filename), config),
        export_workbook(directory, os.path.join(output_dir, config.workbook_filename), config),
    ]
