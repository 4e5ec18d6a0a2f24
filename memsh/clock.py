"""
Wall-clock formatting for the date command and audit records
"""

from datetime import datetime
from typing import Optional

DISPLAY_FORMAT = '%c'
AUDIT_FORMAT = '%Y-%m-%d %H:%M:%S'

def now_display(now: Optional[datetime] = None) -> str:
    """Local date and time in the locale's preferred representation"""
    return (now or datetime.now()).strftime(DISPLAY_FORMAT)

def now_audit(now: Optional[datetime] = None) -> str:
    """Local date and time with second precision"""
    return (now or datetime.now()).strftime(AUDIT_FORMAT)
