"""Write the monthly attendance recap of one month to an .xlsx file.

Usage: python scripts/export_recap.py 2025-08 [output.xlsx]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from teacher_attendance.container import build_container, build_storage
from teacher_attendance.reports.period import parse_month


def main(argv: list[str]) -> None:
    if not argv:
        raise SystemExit(__doc__)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        storage=build_storage(settings.DATA_DIR),
        state_key=settings.STATE_KEY,
        print_settings_key=settings.PRINT_SETTINGS_KEY,
    )

    year, month = parse_month(argv[0])
    out_file = Path(argv[1]) if len(argv) > 1 else Path(f"rekap_absensi_{year:04d}_{month:02d}.xlsx")
    out_file.write_bytes(container.report_service.export_recap(year, month))
    print(f"OK: Recap written to {out_file}")


if __name__ == "__main__":
    main(sys.argv[1:])
