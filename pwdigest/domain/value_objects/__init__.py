"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from pwdigest.domain.value_objects.password import Password

__all__ = [
    "Password",
]
