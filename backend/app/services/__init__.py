"""Services Layer — IO-bound operations behind the core contracts.

Invariants:
    - Services implement core/repository_protocols.py; routes never issue SQL
"""
