"""Database layer — dialect-aware types, ORM models, session and pagination."""
