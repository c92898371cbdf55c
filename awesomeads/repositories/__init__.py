"""
Persistence adapters.

json_storage reads the seed file once at startup; memory_repository holds the
live collection. Services should depend on the repository rather than touching
the JSON file.
"""
