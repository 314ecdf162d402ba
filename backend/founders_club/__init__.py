"""Founders Club Application Package — invite-request intake and approval service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
