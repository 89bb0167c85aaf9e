"""
APPLICATION LAYER - Simulated endpoint use cases

This layer contains:
- commands/  → Write operations (receipt mode, access, link create/delete)
- queries/   → Read operations (conversation fetch/list, link fetch)
- dto/       → Request payload models and response data
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No transport code here (status codes live in presentation)
"""
