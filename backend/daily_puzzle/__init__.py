"""Daily Puzzle Application Package: daily riddles that reveal a place on the map.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
