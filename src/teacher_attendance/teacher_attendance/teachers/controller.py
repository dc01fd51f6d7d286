from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .model import Teacher
from .service import avatar_url


def teacher_to_json(t: Teacher) -> dict:
    return {
        "id": t.teacher_id,
        "name": t.name,
        "subject": t.subject,
        "profilePicture": avatar_url(t),
        "workDays": list(t.work_days),
    }


def register(app: Flask, container: Container) -> None:
    def _body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Body JSON tidak valid")
        return data

    @app.route("/api/teachers", methods=["GET"], endpoint="teachers_list")
    def teachers_list():
        return jsonify([teacher_to_json(t) for t in container.teacher_service.list_teachers()])

    @app.route("/api/teachers", methods=["POST"], endpoint="teachers_create")
    def teachers_create():
        data = _body()
        teacher = container.teacher_service.add(
            name=data.get("name") or "",
            subject=data.get("subject"),
            profile_picture=data.get("profilePicture"),
            work_days=data.get("workDays"),
        )
        return jsonify(teacher_to_json(teacher)), 201

    @app.route("/api/teachers/<teacher_id>", methods=["PUT"], endpoint="teachers_update")
    def teachers_update(teacher_id: str):
        data = _body()
        teacher = container.teacher_service.update(
            teacher_id,
            name=data.get("name"),
            subject=data.get("subject"),
            profile_picture=data.get("profilePicture"),
            work_days=data.get("workDays"),
        )
        return jsonify(teacher_to_json(teacher))

    @app.route("/api/teachers/<teacher_id>", methods=["DELETE"], endpoint="teachers_delete")
    def teachers_delete(teacher_id: str):
        container.teacher_service.delete(teacher_id)
        return "", 204

    @app.route("/api/teachers/<teacher_id>/schedule", methods=["PUT"], endpoint="teachers_schedule")
    def teachers_schedule(teacher_id: str):
        data = _body()
        teacher = container.teacher_service.update_schedule(teacher_id, data.get("workDays") or [])
        return jsonify(teacher_to_json(teacher))

    @app.route("/api/schedules", methods=["PUT"], endpoint="schedules_save")
    def schedules_save():
        data = _body()
        schedules = {str(k): v or [] for k, v in data.items()}
        saved = container.teacher_service.save_schedules(schedules)
        return jsonify({"saved": saved})
