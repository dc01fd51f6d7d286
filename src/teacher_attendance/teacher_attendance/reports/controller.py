from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..container import Container
from .aggregation import Analysis, OverallSummary, TeacherSummary
from .monthly import MonthlyRecap
from .period import default_period, parse_month, period_label
from .service import filter_trend


def summary_to_json(s: TeacherSummary) -> dict:
    return {
        "teacherId": s.teacher_id,
        "name": s.name,
        "workDaysInPeriod": s.work_days_in_period,
        "presentDays": s.present_days,
        "S": s.sick,
        "I": s.permit,
        "A": s.absent,
        "presencePercentage": s.presence_percentage,
    }


def overall_to_json(o: OverallSummary) -> dict:
    return {
        "PRESENT": o.present,
        "SICK": o.sick,
        "PERMIT": o.permit,
        "ABSENT": o.absent,
        "totalWorkDays": o.total_work_days,
        "presencePercentage": o.presence_percentage,
    }


def analysis_to_json(a: Analysis, series: dict) -> dict:
    return {
        "period": {
            "token": a.period.token,
            "label": period_label(a.period),
            "start": a.period.start.isoformat(),
            "end": a.period.end.isoformat(),
        },
        "teacherStats": [summary_to_json(s) for s in a.teacher_stats],
        "overallStats": overall_to_json(a.overall),
        "trend": {"labels": list(a.trend.labels), "datasets": {k: list(v) for k, v in series.items()}},
    }


def recap_to_json(r: MonthlyRecap) -> dict:
    return {
        "label": r.label,
        "signedOn": r.signed_on,
        "days": [{"day": d.day, "type": d.day_type.value, "description": d.description} for d in r.days],
        "rows": [
            {
                "teacherId": row.teacher_id,
                "name": row.name,
                "cells": [
                    {
                        "day": c.day,
                        "isWorkDay": c.is_work_day,
                        "status": c.status.value if c.status else None,
                        "code": c.code,
                    }
                    for c in row.cells
                ],
                "summary": summary_to_json(row.summary),
            }
            for row in r.rows
        ],
        "statusTotals": {status.value: count for status, count in r.status_totals.items()},
    }


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/api/periods", methods=["GET"], endpoint="report_periods")
    def report_periods():
        year = request.args.get("year", type=int)
        options, default = reports.period_options(year)
        return jsonify(
            {
                "options": [{"value": o.value, "label": o.label, "group": o.group} for o in options],
                "default": default,
            }
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="report_dashboard")
    def report_dashboard():
        analysis = reports.dashboard(request.args.get("period"))
        selected = request.args.getlist("teacher")
        series = filter_trend(analysis, selected) if selected else analysis.trend.series
        return jsonify(analysis_to_json(analysis, series))

    @app.route("/api/recap", methods=["GET"], endpoint="report_recap")
    def report_recap():
        year, month = parse_month(request.args.get("month") or default_period(container.today_provider()))
        return jsonify(recap_to_json(reports.monthly_recap(year, month)))

    @app.route("/api/recap/export", methods=["GET"], endpoint="report_recap_export")
    def report_recap_export():
        year, month = parse_month(request.args.get("month") or default_period(container.today_provider()))
        content = reports.export_recap(year, month)
        return send_file(
            io.BytesIO(content),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=f"rekap_absensi_{year:04d}_{month:02d}.xlsx",
        )

    @app.route("/api/print-settings", methods=["GET"], endpoint="print_settings_get")
    def print_settings_get():
        return jsonify(reports.get_print_settings().to_dict())

    @app.route("/api/print-settings", methods=["PUT"], endpoint="print_settings_put")
    def print_settings_put():
        settings = reports.save_print_settings(request.get_json(silent=True) or {})
        return jsonify(settings.to_dict())
