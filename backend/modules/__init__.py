"""
Feature modules for Bastion backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's service (if it has one)
- models.py: Pydantic models (or dataclasses) for data transfer
- service.py: Business logic implementation
- exceptions.py: Constructors for the module's BastionError kinds (if it raises any)

Modules communicate through interfaces, not concrete implementations.
"""
