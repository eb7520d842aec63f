"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
for persistence, configuration and logging.
"""
