"""
FastAPI routers grouped by domain.

Each file inside this package exposes an APIRouter that the application
factory (app.py) includes.
"""
