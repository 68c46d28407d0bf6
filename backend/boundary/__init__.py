"""
Boundary layer for external system integrations.

Handles all interactions with external systems (databases, chunk stores).
Provides adapters and clients for infrastructure dependencies.
"""
