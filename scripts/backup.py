"""Backup the persisted state.

Note: copies the JSON documents of DATA_DIR into backups/ with a timestamp.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if not settings.DATA_DIR:
        raise SystemExit("DATA_DIR kosong: state hanya ada di memori, tidak ada yang di-backup.")

    data_dir = Path(settings.DATA_DIR)
    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    copied = 0
    for key in (settings.STATE_KEY, settings.PRINT_SETTINGS_KEY):
        src = data_dir / f"{key}.json"
        if not src.exists():
            continue
        shutil.copy2(src, out_dir / f"{key}_{ts}.json")
        copied += 1

    if not copied:
        raise SystemExit(f"Tidak ada file state di {data_dir}")
    print(f"OK: Backup created in {out_dir} ({copied} file)")


if __name__ == "__main__":
    main()
