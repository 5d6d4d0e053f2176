"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
and the process-wide concerns (settings, logging, database engine).
"""
