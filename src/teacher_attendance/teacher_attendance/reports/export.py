from __future__ import annotations

import io

import pandas as pd

from .monthly import MonthlyRecap
from .print_settings import PrintSettings

SHEET_NAME = "Rekap"
HEADER_ROWS = 4


def recap_to_frame(recap: MonthlyRecap) -> pd.DataFrame:
    rows = []
    for i, row in enumerate(recap.rows, start=1):
        item: dict = {"No": i, "Nama Guru": row.name}
        for cell in row.cells:
            item[str(cell.day)] = cell.code
        s = row.summary
        item.update(
            {
                "Hari Kerja": s.work_days_in_period,
                "S": s.sick,
                "I": s.permit,
                "A": s.absent,
                "Hadir": s.present_days,
                "%": s.presence_percentage,
            }
        )
        rows.append(item)

    columns = ["No", "Nama Guru"] + [str(d.day) for d in recap.days] + ["Hari Kerja", "S", "I", "A", "Hadir", "%"]
    return pd.DataFrame(rows, columns=columns)


def recap_to_xlsx(recap: MonthlyRecap, settings: PrintSettings) -> bytes:
    """Spreadsheet version of the printed monthly attendance list."""
    df = recap_to_frame(recap)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME, startrow=HEADER_ROWS)
        ws = writer.sheets[SHEET_NAME]
        ws.cell(row=1, column=1, value=settings.title.upper())
        ws.cell(row=2, column=1, value=f"TAHUN PELAJARAN {settings.school_year}".upper())
        ws.cell(row=3, column=1, value=f"BULAN {recap.label}".upper())

        footer = HEADER_ROWS + len(df) + 3
        ws.cell(row=footer, column=2, value=f"{settings.city}, {recap.signed_on}")
        ws.cell(row=footer + 1, column=2, value="Kepala Sekolah")
        ws.cell(row=footer + 5, column=2, value=settings.principal_name)

    return output.getvalue()
