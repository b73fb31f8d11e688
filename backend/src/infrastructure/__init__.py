"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
and integrations with external services (database, document storage).
"""
