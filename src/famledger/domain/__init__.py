"""Domain layer for famledger application.

Services live in their own modules (``famledger.domain.transaction``,
``famledger.domain.balance``) and are imported from there; the package itself
stays import-free so the database layer can load entities without a cycle.
"""
