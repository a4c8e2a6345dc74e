"""Input checks shared by the core services."""

from collections.abc import Sequence
from typing import Any

from src.selectshop.core.exceptions import InvalidArgumentError


def is_blank(value: str) -> bool:
    return not value.strip()


def require_non_blank(value: Any, field: str) -> str:
    """Return ``value`` unchanged if it is a string with visible characters."""
    if not isinstance(value, str) or is_blank(value):
        raise InvalidArgumentError(f"{field} must not be blank")
    return value


def validate_folder_names(names: Sequence[str] | None) -> list[str]:
    """Check a batch of folder names before anything is written.

    The whole batch is rejected if it is empty or any element is blank;
    names are returned exactly as given.
    """
    if names is None or isinstance(names, str) or len(names) == 0:
        raise InvalidArgumentError("At least one folder name is required")

    checked = []
    for index, name in enumerate(names):
        if not isinstance(name, str) or is_blank(name):
            raise InvalidArgumentError(f"Folder name at position {index} is blank")
        checked.append(name)
    return checked
