"""
TechStacks Source Root

This package serves as the root for the TechStacks content web service.

Layer Structure:
- Domain: Core entities, ports and validation rules
- Application: Use cases, DTOs and host configuration
- Infrastructure: Database, caches, OAuth providers and external clients
- Presentation: Controllers, middleware and server-rendered views
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, bootstrapper and application entry point
"""
