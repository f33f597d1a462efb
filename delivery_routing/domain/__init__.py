"""
Domain Layer

- base/: Shared kernel with base exceptions and events
- route/: Route calculation bounded context
"""
