"""
Source Code Root Module

This module serves as the root for the source code of the carts health API.

Layer Structure:
- Domain: Health outcomes, secrets, errors and ports
- Application: Probe use cases and DTOs
- Infrastructure: Key Vault gateway and configuration providers
- Presentation: Controllers and routes for the HTTP API
- Shared: Cross-cutting concerns (logging, telemetry tagging, env)
- Main: Composition root, application entry point and configuration
"""
