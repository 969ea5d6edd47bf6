"""Configuration defaults and environment lookups."""

import os
from pathlib import Path
from typing import Optional

from budgetdash.domain.amortization import DEFAULT_HORIZON_MONTHS
from budgetdash.domain.entities import PayoffPolicy

DOCUMENT_PATH_ENV = "BUDGETDASH_FILE"
HORIZON_ENV = "BUDGETDASH_HORIZON"
POLICY_ENV = "BUDGETDASH_POLICY"
LOG_LEVEL_ENV = "BUDGETDASH_LOG_LEVEL"

DEFAULT_POLICY = PayoffPolicy.INDEPENDENT.value
DEFAULT_HORIZON = DEFAULT_HORIZON_MONTHS
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_document_path(document_path: Optional[str] = None) -> Path:
    """Resolve the budget document location.

    Args:
        document_path: Path to the JSON document. If None, checks BUDGETDASH_FILE
            environment variable, then defaults to ~/.budgetdash/budget.json

    Returns:
        Path to the document (the file itself may not exist yet)
    """
    if document_path is None:
        document_path = os.environ.get(DOCUMENT_PATH_ENV)

    if document_path is None:
        return Path.home() / ".budgetdash" / "budget.json"

    return Path(document_path).expanduser()
