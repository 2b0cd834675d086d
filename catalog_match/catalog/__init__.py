"""
Catalog helpers.

Responsibilities:
- Load candidate records from a CSV export of the catalog.
- Match ad-hoc queries against that catalog from the command line.
"""
