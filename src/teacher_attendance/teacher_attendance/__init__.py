"""Teacher Attendance package.

Organized by feature modules (teachers, school_calendar, attendance, reports)
around a reducer-style state store, with a thin Flask controller layer on top.
"""
