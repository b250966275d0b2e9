"""
Business services for Planit.

- users.py: registration and sign-in lookup
- trips.py: trip registry (create, find by code, join, delete)
- activities.py: activity ledger and vote toggling
- quorum.py: lock-in rule
- budget.py: cost totals and category breakdown
- timeline.py: activities grouped by day
"""

__all__: list[str] = []
