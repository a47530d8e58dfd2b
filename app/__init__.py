"""MediatR Demo Application Package.

This package contains the core application components:
- models: the Ping request and validation result models
- routers: API route handlers
- services: mediator, validation pipeline and the Ping handler
- utils: HTTP error mapping
"""

__version__ = "0.1.0"
