"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Every request body is an explicit model validated before any query runs

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
