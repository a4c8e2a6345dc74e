"""Tests for shared input checks."""

import pytest

from src.selectshop.core.exceptions import InvalidArgumentError
from src.selectshop.core.validation import require_non_blank, validate_folder_names


def test_folder_names_returned_unchanged():
    assert validate_folder_names(["전자기기", " a ", "A"]) == ["전자기기", " a ", "A"]


@pytest.mark.parametrize("names", [[], None, (), "folder"])
def test_empty_or_non_sequence_rejected(names):
    with pytest.raises(InvalidArgumentError, match="At least one folder name"):
        validate_folder_names(names)


def test_blank_name_reports_position():
    with pytest.raises(InvalidArgumentError, match="position 1"):
        validate_folder_names(["ok", "  "])


def test_require_non_blank():
    assert require_non_blank("x", "field") == "x"
    with pytest.raises(InvalidArgumentError, match="field must not be blank"):
        require_non_blank("", "field")
