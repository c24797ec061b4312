"""
Pydantic schema definitions for API payloads.

Each domain (firms, reviews, resources, users) defines its own
Pydantic models for request and response bodies.  Field names are
snake_case in Python and camelCase on the wire.
"""
