"""Core Layer — domain types, error hierarchy and boundary contracts. No IO.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
