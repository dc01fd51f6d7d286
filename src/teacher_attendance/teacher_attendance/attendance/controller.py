from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import from_key
from ..container import Container
from ..core.exceptions import ValidationError
from ..reports.period import default_period, parse_month
from .model import AttendanceRecord


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "teacherId": r.teacher_id,
        "date": r.date,
        "status": r.status.value,
        "checkIn": r.check_in,
        "checkOut": r.check_out,
    }


def register(app: Flask, container: Container) -> None:
    def _body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Body JSON tidak valid")
        return data

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_month")
    def attendance_month():
        year, month = parse_month(request.args.get("month") or default_period(container.today_provider()))
        records = container.attendance_service.records_for_month(year, month)
        return jsonify([record_to_json(r) for r in records])

    @app.route("/api/attendance/<teacher_id>/<day>", methods=["PUT"], endpoint="attendance_individual")
    def attendance_individual(teacher_id: str, day: str):
        data = _body()
        record = container.attendance_service.record_individual(
            teacher_id=teacher_id,
            day=from_key(day),
            status=data.get("status") or "",
            check_in=data.get("checkIn"),
            check_out=data.get("checkOut"),
        )
        return jsonify(record_to_json(record))

    @app.route("/api/attendance/mass", methods=["POST"], endpoint="attendance_mass")
    def attendance_mass():
        data = _body()
        teacher_ids = data.get("teacherIds")
        if teacher_ids is None:
            teacher_ids = [t.teacher_id for t in container.teacher_service.list_teachers()]
        elif not isinstance(teacher_ids, list):
            raise ValidationError("teacherIds harus berupa daftar")

        written = container.attendance_service.record_mass(
            teacher_ids=[str(t) for t in teacher_ids],
            start=from_key(data.get("startDate") or ""),
            end=from_key(data.get("endDate") or data.get("startDate") or ""),
            status=data.get("status") or "",
            check_in=data.get("checkIn"),
            check_out=data.get("checkOut"),
        )
        return jsonify({"written": written})
