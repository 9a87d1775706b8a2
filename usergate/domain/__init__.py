"""Domain layer - Pure business logic.

Contains domain events and the protocols (ports) that infrastructure
adapters implement. No framework or infrastructure imports.

Structure:
- events/: Domain events (things that happened in the domain)
- protocols/: Ports (event bus, logger)
"""
