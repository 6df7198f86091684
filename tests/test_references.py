import pytest

from giving.errors import ValidationError
from giving.services.references import REFERENCE_CODES, UNKNOWN_REFERENCE, resolve_reference


def test_reference_table():
    assert REFERENCE_CODES == {"tithe": "TITHE", "offering": "OFFERING", "haggai": "HP2025"}


def test_unmapped_type_falls_back_to_unknown():
    assert resolve_reference("Tithe") == UNKNOWN_REFERENCE
    assert resolve_reference("missions") == "UNKNOWN"


def test_strict_resolution_rejects_unmapped_type():
    with pytest.raises(ValidationError) as info:
        resolve_reference("missions", strict=True)

    assert info.value.status_code == 400
    assert resolve_reference("haggai", strict=True) == "HP2025"
