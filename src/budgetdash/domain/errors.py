"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entry or path does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as duplicate entry IDs."""


def entry_not_found(kind: str, reference: str) -> str:
    """Return message for a missing scenario entry."""
    return f"{kind.capitalize()} '{reference}' not found"


def ambiguous_entry(kind: str, name: str, count: int) -> str:
    """Return message when an entry name matches several entries."""
    return f"{count} {kind} entries are named '{name}'; use the entry ID instead"


def duplicate_entry_id(kind: str, entry_id: str) -> str:
    """Return message for a duplicate entry ID."""
    return f"{kind.capitalize()} with ID '{entry_id}' already exists"


def unknown_scenario(key: str) -> str:
    """Return message for a scenario key that is not 'current' or 'plan'."""
    return f"Unknown scenario '{key}'. Expected 'current' or 'plan'"


def invalid_document(reason: str) -> str:
    """Return message for a rejected scenario document."""
    return f"Invalid file format: {reason}"


def document_not_found(path: str) -> str:
    """Return message for a missing document file."""
    return f"Budget file not found: {path}. Run 'budgetdash init' to create one"
