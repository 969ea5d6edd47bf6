"""Utility for resolving entry names to entries."""

from typing import Sequence, TypeVar

from budgetdash.domain import errors
from budgetdash.domain.errors import NotFoundError, ValidationError

Entry = TypeVar("Entry")


def resolve_entry(entries: Sequence[Entry], reference: str, kind: str = "entry") -> Entry:
    """Resolve an entry ID or name to the entry.

    Args:
        entries: Entries of one collection (income, expenses, debts or goals)
        reference: Entry ID, or its exact name
        kind: Collection label used in error messages

    Returns:
        The matching entry

    Raises:
        NotFoundError: If no entry has that ID or name
        ValidationError: If the name matches more than one entry
    """
    reference = reference.strip()

    # IDs win over names
    for entry in entries:
        if entry.id == reference:
            return entry

    matches = [entry for entry in entries if entry.name == reference]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ValidationError(errors.ambiguous_entry(kind, reference, len(matches)))

    raise NotFoundError(errors.entry_not_found(kind, reference))
