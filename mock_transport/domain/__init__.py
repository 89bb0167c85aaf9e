"""
DOMAIN LAYER - Simulated server-side state

This layer contains:
- Entities: Conversation as the backend stores it
- Value Objects: ConversationId, UserId
- Ports: Repository and clock interfaces
- Exceptions: Backend rejections (not found, forbidden, bad request)

RULES:
1. NO framework imports (no Pydantic, no dishka)
2. NO I/O operations
3. Only depends on Python stdlib
"""
