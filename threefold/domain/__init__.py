"""
Domain layer.

Entities, value objects and pure domain services. Nothing in here imports
SQLAlchemy, FastAPI or any other infrastructure.
"""
