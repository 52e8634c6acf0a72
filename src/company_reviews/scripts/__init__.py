"""Operational scripts (database setup and seeding)."""
