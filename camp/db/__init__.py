"""Persistence layer: engine/session, ORM models, pydantic schemas, repositories."""
