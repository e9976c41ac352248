"""Domain layer - Pure business logic.

Structure:
- entities/: Domain entities (User with the activation state machine)
- enums/: Role tags and activation states
- protocols/: Ports (repositories, security services, notifier, logger)
- events/: Domain events (things that happened)
- validators/ and types.py: Annotated input types

The domain layer has no dependencies on frameworks or infrastructure.
"""
