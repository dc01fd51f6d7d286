from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import from_key
from ..container import Container
from ..reports.period import default_period, parse_month


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="calendar_month")
    def calendar_month():
        year, month = parse_month(request.args.get("month") or default_period(container.today_provider()))
        days = container.calendar_service.month_view(year, month)
        return jsonify(
            [
                {
                    "date": d.date,
                    "day": d.day,
                    "weekday": d.weekday,
                    "type": d.day_type.value,
                    "description": d.description,
                    "isOverride": d.is_override,
                }
                for d in days
            ]
        )

    @app.route("/api/calendar/<day>", methods=["PUT"], endpoint="calendar_set_day")
    def calendar_set_day(day: str):
        data = request.get_json(silent=True) or {}
        setting = container.calendar_service.set_day(
            day=from_key(day),
            day_type=data.get("type") or "",
            description=data.get("description"),
        )
        return jsonify({"date": setting.date, "type": setting.day_type.value, "description": setting.description})
