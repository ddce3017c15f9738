"""Customer Inquiry Package — validated keyed lookup of customer master records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
