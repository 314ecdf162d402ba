"""Services Layer — the intake and approval workflows.

Invariants:
    - Services receive their DB session and mail sender from the caller
    - Services raise core/errors.py types; routes never build error bodies
"""
