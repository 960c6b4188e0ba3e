from __future__ import annotations

from flask import Flask

from ..common.web import Guards, ok
from ..container import Container
from ..core.enums import Resource


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.auth_service)
    dashboard = container.dashboard_service

    @app.route("/api/stats", endpoint="stats")
    @guards.can_view(Resource.DASHBOARD)
    def stats():
        s = dashboard.get_system_stats()
        return ok(
            {
                "total_students": s.total_students,
                "total_teachers": s.total_teachers,
                "today_percentage": s.today_percentage,
                "low_attendance_alerts": s.low_attendance_alerts,
            }
        )

    @app.route("/api/stats/weekly", endpoint="stats_weekly")
    @guards.can_view(Resource.DASHBOARD)
    def stats_weekly():
        data = [
            {"date": p.date, "label": p.label, "present": p.present, "absent": p.absent, "leave": p.leave}
            for p in dashboard.get_weekly_data()
        ]
        return ok({"data": data})

    @app.route("/api/stats/distribution", endpoint="stats_distribution")
    @guards.can_view(Resource.DASHBOARD)
    def stats_distribution():
        d = dashboard.get_status_distribution()
        return ok(
            {
                "total": d.total,
                "present": {"count": d.present, "percentage": d.present_percentage},
                "absent": {"count": d.absent, "percentage": d.absent_percentage},
                "leave": {"count": d.leave, "percentage": d.leave_percentage},
            }
        )
