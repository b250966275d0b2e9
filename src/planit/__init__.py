"""
Core business logic package for Planit.

All business logic, data access, and configuration live here.
Lambda handlers in src/handlers/ are thin wrappers that call into planit/.
"""

__all__: list[str] = []
