"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StudentId wraps the database-assigned integer key — never invented client-side
    - Ids outside the signed 64-bit range are rejected at the API boundary

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentId = NewType("StudentId", int)

# SQLite INTEGER / PostgreSQL BIGINT range; wider ids never reach the store
STUDENT_ID_MIN = -(2**63)
STUDENT_ID_MAX = 2**63 - 1
