"""Infrastructure Layer: database engine/session management and logging setup.

Invariants:
    - Infrastructure never imports from core/ domain logic, only core/errors.py
    - All SQLAlchemy exceptions mapped to the core error hierarchy
"""
