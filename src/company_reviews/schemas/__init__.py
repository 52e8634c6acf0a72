"""Pydantic schemas for the company review API."""
