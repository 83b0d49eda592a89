"""Domain layer - Pure business logic.

Structure:
- entities/: Domain entities (User, Allocation)
- enums/: User types and owning applications
- errors/: Domain error values and exceptions
- protocols/: Ports (repository, directory client, logger)

The domain layer has NO dependencies on any framework or infrastructure.
"""
