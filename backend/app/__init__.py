"""Students API Package — CRUD over a single students table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
