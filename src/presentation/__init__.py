"""
Presentation Layer - HTTP transport.

Pydantic schemas, FastAPI routers and the mapping of domain errors to
responses. No business rules live here.
"""
