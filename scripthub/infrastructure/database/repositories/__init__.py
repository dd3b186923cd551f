"""SQLAlchemy-backed repository implementations.

Import the concrete modules directly; this package does not re-export them
so that the domain modules can import their repositories lazily.
"""
