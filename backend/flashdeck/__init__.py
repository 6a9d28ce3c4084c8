"""Flashdeck Application Package — flashcard library backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
