"""Core services and cross-cutting concerns.

This module intentionally does not re-export symbols from submodules
to avoid circular imports. Import directly from submodules when needed:

- workboard.core.database: Base, get_db, OrganizationMixin, etc.
- workboard.core.errors: AppException, NotFoundError, etc.
- workboard.core.auth: token and password utilities, access context
- workboard.core.logging: request logging middleware
"""
