"""Attendance Tracker package.

This package is organized by feature modules (roster, attendance, sync, ...)
with a thin terminal menu layer over service/repository layers that persist
to flat delimited files.
"""
