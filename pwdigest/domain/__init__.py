"""Domain layer - Pure business logic.

Structure:
- value_objects/: Value objects (immutable, no identity)
- errors/: Domain error types returned inside Failure
- protocols/: Service interfaces (ports) implemented by infrastructure

The domain layer defines WHAT a password is, not HOW it is hashed.
"""
