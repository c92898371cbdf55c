"""
Core utilities shared across the AwesomeAds API.

This package hosts configuration helpers (env vars, paths) and logging setup.
Routers/services should depend on these primitives instead of reading
os.environ or touching handlers directly.
"""
