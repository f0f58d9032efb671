"""
Customer record management.

Holds customer records in memory, persists them as one delimited line per
record, and drives the operator's create/list/search/update/delete session.
"""
