"""
High-level use cases for the AwesomeAds API.

Routers (FastAPI endpoints) call these services instead of manipulating the
repository directly.
"""
