"""Example: use the service layer directly (no Flask).

Controllers stay thin; the attendance rules live in services and reports.
"""

import importlib

from config import get_settings_module

from teacher_attendance.container import build_container, build_storage


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        storage=build_storage(settings.DATA_DIR),
        state_key=settings.STATE_KEY,
        print_settings_key=settings.PRINT_SETTINGS_KEY,
    )

    analysis = container.report_service.dashboard()
    print(analysis.period.token, analysis.overall)
    for s in analysis.teacher_stats:
        print(f"{s.name:<20} {s.presence_percentage:>3}%  S={s.sick} I={s.permit} A={s.absent}")


if __name__ == "__main__":
    main()
