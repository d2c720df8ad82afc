"""
BOQ Excel import/export.

Import expects a header row; columns are found by name (Russian or English
variants), so column order in the file does not matter.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable

import openpyxl
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter


COLUMN_MAP = {
    'section': ['раздел', 'section'],
    'description': ['наименование работ', 'описание', 'description', 'item'],
    'unit': ['ед.', 'ед. изм.', 'единица', 'unit'],
    'quantity': ['количество', 'кол-во', 'qty', 'quantity'],
    'rate': ['расценка', 'цена', 'rate', 'price'],
}
REQUIRED_COLUMNS = ('description', 'quantity')

# Decimal places and integer digits of BOQItem.quantity / BOQItem.rate
QUANTITY_PLACES = Decimal('0.001')
RATE_PLACES = Decimal('0.01')
MAX_QUANTITY = Decimal(10) ** 11
MAX_RATE = Decimal(10) ** 12

EXPORT_HEADERS = ['Section', 'No.', 'Description', 'Unit', 'Quantity', 'Rate', 'Amount']


def _to_str(v: Any) -> str:
    if v is None:
        return ''
    return str(v).strip()


def _to_decimal(v: Any, places: Decimal, limit: Decimal) -> Decimal | None:
    """Finite number rounded half up to ``places``; None for blanks, text, NaN/Infinity and overflow."""
    if v is None or _to_str(v) == '':
        return None
    try:
        d = Decimal(_to_str(v).replace(',', '.').replace(' ', ''))
    except InvalidOperation:
        return None
    if not d.is_finite() or abs(d) >= limit:
        return None
    return d.quantize(places, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class BOQImportError:
    row: int
    column: str
    message: str

    def to_dict(self) -> dict:
        return {
            'row': self.row,
            'column': self.column,
            'message': self.message,
        }


@dataclass
class BOQParseResult:
    rows: list[dict] = field(default_factory=list)
    errors: list[BOQImportError] = field(default_factory=list)
    total_rows: int = 0

    @property
    def summary(self) -> dict:
        return {
            'total_rows': self.total_rows,
            'valid_rows': len(self.rows),
            'error_rows': len({e.row for e in self.errors}),
            'errors_count': len(self.errors),
        }


class BOQFormatError(ValueError):
    """The workbook has no usable header row."""


def _find_columns(header_cells) -> dict[str, int]:
    headers = {}
    for idx, value in enumerate(header_cells):
        name = _to_str(value).lower()
        if name:
            headers[name] = idx

    columns = {}
    for key, variants in COLUMN_MAP.items():
        for variant in variants:
            if variant in headers:
                columns[key] = headers[variant]
                break
    return columns


def parse_boq_workbook(file_obj, default_section: str = 'General') -> BOQParseResult:
    """
    Parse BOQ lines from the active sheet.

    A row with only the section column filled starts a new section for the
    rows below it; rows without their own section inherit the current one.
    """
    wb = openpyxl.load_workbook(filename=file_obj, read_only=True, data_only=True)
    try:
        ws = wb.active
        rows = ws.iter_rows(values_only=True)
        header = next(rows, None)
        if header is None:
            raise BOQFormatError('Файл пуст.')

        columns = _find_columns(header)
        missing = [c for c in REQUIRED_COLUMNS if c not in columns]
        if missing:
            raise BOQFormatError(f"Не найдены колонки: {', '.join(missing)}")

        def cell(values, key):
            idx = columns.get(key)
            if idx is None or idx >= len(values):
                return None
            return values[idx]

        result = BOQParseResult()
        current_section = default_section
        position = 0

        for row_idx, values in enumerate(rows, start=2):
            values = list(values or [])
            if all(_to_str(v) == '' for v in values):
                continue

            section = _to_str(cell(values, 'section'))
            description = _to_str(cell(values, 'description'))
            raw_quantity = cell(values, 'quantity')

            # Section heading row
            if section and not description and _to_str(raw_quantity) == '':
                current_section = section
                position = 0
                continue

            result.total_rows += 1
            row_errors = []

            if not description:
                row_errors.append(BOQImportError(row_idx, 'description', 'Не указано наименование работ.'))

            quantity = _to_decimal(raw_quantity, QUANTITY_PLACES, MAX_QUANTITY)
            if quantity is None:
                row_errors.append(BOQImportError(row_idx, 'quantity', f"Некорректное количество: '{_to_str(raw_quantity)}'."))
            elif quantity < 0:
                row_errors.append(BOQImportError(row_idx, 'quantity', 'Количество не может быть отрицательным.'))

            raw_rate = cell(values, 'rate')
            rate = _to_decimal(raw_rate, RATE_PLACES, MAX_RATE)
            if rate is None and _to_str(raw_rate) != '':
                row_errors.append(BOQImportError(row_idx, 'rate', f"Некорректная расценка: '{_to_str(raw_rate)}'."))

            if row_errors:
                result.errors.extend(row_errors)
                continue

            position += 1
            result.rows.append({
                'row': row_idx,
                'section': section or current_section,
                'position': position,
                'description': description,
                'unit': _to_str(cell(values, 'unit')),
                'quantity': quantity,
                'rate': rate,
            })

        return result
    finally:
        wb.close()


def build_boq_workbook(project_name: str, items: Iterable) -> bytes:
    """Render BOQ items to an .xlsx file, one block per section with subtotals."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'BOQ'

    header_font = Font(bold=True)
    ws.cell(row=1, column=1, value=project_name).font = Font(bold=True, size=14)

    for col, header in enumerate(EXPORT_HEADERS, 1):
        c = ws.cell(row=3, column=col, value=header)
        c.font = header_font
        c.alignment = Alignment(horizontal='center')

    row = 4
    grand_total = Decimal('0')
    current_section = None
    section_total = Decimal('0')

    def write_subtotal(at_row, section, total):
        ws.cell(row=at_row, column=3, value=f'Total {section}').font = header_font
        ws.cell(row=at_row, column=7, value=float(total)).font = header_font
        return at_row + 1

    for item in items:
        if current_section is not None and item.section != current_section:
            row = write_subtotal(row, current_section, section_total)
            section_total = Decimal('0')
        current_section = item.section

        ws.cell(row=row, column=1, value=item.section)
        ws.cell(row=row, column=2, value=item.position)
        ws.cell(row=row, column=3, value=item.description)
        ws.cell(row=row, column=4, value=item.unit)
        ws.cell(row=row, column=5, value=float(item.quantity))
        ws.cell(row=row, column=6, value=float(item.rate) if item.rate is not None else None)
        ws.cell(row=row, column=7, value=float(item.amount) if item.amount is not None else None)
        if item.amount is not None:
            section_total += item.amount
            grand_total += item.amount
        row += 1

    if current_section is not None:
        row = write_subtotal(row, current_section, section_total)

    ws.cell(row=row + 1, column=3, value='Grand total').font = header_font
    ws.cell(row=row + 1, column=7, value=float(grand_total)).font = header_font

    for col in range(1, len(EXPORT_HEADERS) + 1):
        letter = get_column_letter(col)
        max_length = max(
            (len(_to_str(c.value)) for c in ws[letter] if c.row > 1),
            default=0
        )
        ws.column_dimensions[letter].width = min(max_length + 2, 60)

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
