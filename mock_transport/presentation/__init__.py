"""
Presentation Layer - Simulated transport surface.

This layer contains:
- transport/: response envelope, conversation endpoints, request routing
"""
