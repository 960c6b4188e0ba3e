"""EduMatrix attendance package.

Organized by feature modules (users, students, attendance, dashboard) with a
thin Flask controller layer over service/repository layers.
"""
