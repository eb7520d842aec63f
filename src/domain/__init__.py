"""
Domain Layer - Entities, value objects and business rules.

This layer has no dependencies on frameworks or infrastructure.
State machines, admission rules and repository contracts live here.
"""
