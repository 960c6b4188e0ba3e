from __future__ import annotations

import logging

from flask import Flask, g, request

from ..common.web import Guards, fail, ok
from ..container import Container
from ..core.enums import Resource
from ..core.exceptions import PersistenceError, ValidationError
from .model import AttendanceRecord, AttendanceSheet
from .service import entry_from_payload, record_from_payload

logger = logging.getLogger(__name__)


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "student_id": r.student_id,
        "date": r.date,
        "status": r.status.value,
        "remarks": r.remarks,
    }


def sheet_to_json(sheet: AttendanceSheet) -> dict:
    return {
        "date": sheet.date,
        "rows": [
            {
                "student_id": row.student_id,
                "name": row.name,
                "roll_no": row.roll_no,
                "status": row.status.value,
                "remarks": row.remarks,
                "recorded": row.recorded,
            }
            for row in sheet.rows
        ],
        "stats": {
            "present": sheet.tally.present,
            "absent": sheet.tally.absent,
            "leave": sheet.tally.leave,
        },
    }


def _split_ids(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.auth_service)
    attendance = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @guards.can_view(Resource.ATTENDANCE)
    def attendance_list():
        date = request.args.get("date") or attendance.today()
        raw_ids = request.args.get("student_ids")
        if raw_ids is None:
            student_ids = [s.student_id for s in container.student_service.students_for(g.current_user)]
        else:
            student_ids = _split_ids(raw_ids)

        rows = attendance.get_attendance(date, student_ids)
        return ok({"date": date, "records": [record_to_json(r) for r in rows]})

    @app.route("/api/attendance/sheet", methods=["GET"], endpoint="attendance_sheet")
    @guards.can_view(Resource.ATTENDANCE)
    def attendance_sheet():
        students = container.student_service.students_for(g.current_user)
        sheet = attendance.build_sheet(request.args.get("date"), students)
        return ok({"sheet": sheet_to_json(sheet)})

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_save")
    @guards.can_write(Resource.ATTENDANCE)
    def attendance_save():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        try:
            if "records" in data:
                payload = data["records"]
                if not isinstance(payload, list):
                    raise ValidationError("records must be a list")
                saved = attendance.save_attendance([record_from_payload(item) for item in payload])
            else:
                entries = data.get("entries")
                if not isinstance(entries, list):
                    raise ValidationError("Provide either records or date and entries")
                saved = attendance.save_sheet(data.get("date"), [entry_from_payload(item) for item in entries])
        except PersistenceError as e:
            # Distinct from in-progress: the client keeps its entries and retries the batch.
            return fail(str(e) or "Attendance could not be saved", 503, retryable=True)

        logger.info("User %s saved %d attendance record(s)", g.current_user.username, saved)
        return ok({"saved": saved, "message": "Saved Successfully"})

    @app.route("/api/students/<student_id>/attendance", endpoint="student_attendance_history")
    @guards.can_view(Resource.REPORTS)
    def student_attendance_history(student_id: str):
        rows = attendance.get_student_attendance_history(student_id)
        return ok({"student_id": student_id, "records": [record_to_json(r) for r in rows]})
