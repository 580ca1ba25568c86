"""
Business logic services

Submodules are imported directly (e.g. `from app.services.habits import service`);
nothing is loaded eagerly here so the storage layer can be imported on its own.
"""
