"""
Utility modules for the signup demo application.
"""

from .timestamps import utc_now_iso, format_timestamp

__all__ = ['utc_now_iso', 'format_timestamp']
