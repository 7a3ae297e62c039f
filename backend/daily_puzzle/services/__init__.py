"""Services Layer: data access and request orchestration.

Invariants:
    - Routes call services; services call PuzzleStore and pure core functions
    - No FastAPI imports here

Design Decisions:
    - One file per concern: store, submissions, identity
"""
