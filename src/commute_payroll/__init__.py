"""Commute payroll package.

Pure payroll and compliance rules shared by every commute application
(desktop admin, web admin, kiosk server). Organized by feature modules
(attendance, payroll, compliance, reports) over a small core.
"""

__version__ = "0.1.0"
