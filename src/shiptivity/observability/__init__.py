"""
shiptivity.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for log enrichment.
"""

# Package marker.
