"""
Health Probes Root Module

Liveness probes for the platform's shared dependencies.

Layer Structure:
- Domain: Report contract, aggregation rule, timed call and collaborator ports
- Application: Use cases and DTOs
- Infrastructure: Probe implementations and client factories
- Presentation: Health endpoints for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
