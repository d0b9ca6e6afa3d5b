"""Team Attendance package.

Roster and training attendance tracking for a single team, organized by feature
modules (roster, trainings, attendance, statistics, export) with a thin Flask
controller layer over service/repository layers.
"""
