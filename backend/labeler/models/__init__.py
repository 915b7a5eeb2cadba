"""Pydantic models for the UI bridge."""
