"""Infrastructure Layer — database pool, migrations and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Every SQLAlchemy failure leaves this layer as DatabaseError
"""
