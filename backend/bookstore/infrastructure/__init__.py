"""Infrastructure Layer: database session management and logging setup.

Invariants:
    - Infrastructure never imports route or service modules
    - Driver exceptions are mapped to core/errors.py types before leaving this layer
"""
