"""Test suite for pwdigest.

Test structure:
- unit/: Unit tests - domain logic, adapters and configuration in isolation
"""
