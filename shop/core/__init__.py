"""
Core utilities shared across the shop API.

This package hosts configuration helpers (env vars, database URL), the
logging setup and the base error type every use case raises. Services and
routers depend on these primitives instead of reading os.environ directly.
"""
