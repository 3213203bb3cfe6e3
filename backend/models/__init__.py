"""Pydantic response and request schemas shared by the application services."""
