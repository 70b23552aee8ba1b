"""
Utility functions module.

Date Semantics:
- Quotes are identified by trading session, i.e. a calendar date
- Datetimes coming from sources or callers are truncated to their date
- Dates are never compared with a time-of-day component
"""
