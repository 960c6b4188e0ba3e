"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

from edumatrix.container import build_container
from edumatrix.main import load_settings


def main():
    container = build_container(settings=load_settings({"SEED_DEMO_DATA": True}))

    user = container.auth_service.login("teacher")
    students = container.student_service.get_students_by_teacher(user.user_id)
    sheet = container.attendance_service.build_sheet(None, students)
    print(f"{user.full_name}: {len(sheet.rows)} students on {sheet.date}, tally={sheet.tally}")

    print(container.dashboard_service.get_system_stats())
    for point in container.dashboard_service.get_weekly_data():
        print(point.label, point.present, point.absent, point.leave)


if __name__ == "__main__":
    main()
