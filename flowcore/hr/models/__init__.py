# ============================================
# hr/models/__init__.py
# ============================================
from .attendance import Attendance, AttendanceSession
from .leave import MAX_LEAVE_DAYS, LeaveRequest

__all__ = [
    'Attendance',
    'AttendanceSession',
    'LeaveRequest',
    'MAX_LEAVE_DAYS',
]
