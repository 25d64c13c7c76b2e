"""
Tests for the display helpers.
"""

import sys
import os
import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from apolo_calc.utils.format_utils import format_value, format_value_long, format_currency


def test_format_value_abbreviations():
    """Test thousand, million and billion suffixes."""
    assert format_value(1_500_000) == "R$ 1,5 mi"
    assert format_value(2_000_000) == "R$ 2,0 mi"
    assert format_value(3_250_000_000) == "R$ 3,25 bi"
    assert format_value(45_000) == "R$ 45,0 mil"


def test_format_value_small_amounts():
    """Test values below a thousand keep no suffix."""
    assert format_value(950) == "R$ 950,0"
    assert format_value(500, currency=False) == "500"


def test_format_value_without_currency():
    """Test plain number rendering."""
    assert format_value(2_345.6, currency=False) == "2,35 mil"
    assert format_value(1_234_567, currency=False, max_decimals=1) == "1,2 mi"


def test_format_value_negative_and_missing():
    """Test negative values and missing values."""
    assert format_value(-2_000_000) == "-R$ 2,0 mi"
    assert format_value(None) == "-"


def test_format_value_long():
    """Test spelled-out suffixes."""
    assert format_value_long(3_000_000) == "R$ 3,0 milhões"
    assert format_value_long(7_500_000_000) == "R$ 7,5 bilhões"


def test_format_currency():
    """Test full pt-BR currency amounts."""
    assert format_currency(1234567.891) == "R$ 1.234.567,89"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(-1500.5) == "-R$ 1.500,50"


if __name__ == "__main__":
    # Run tests with pytest if available
    try:
        pytest.main([__file__, "-v"])
    except SystemExit:
        pass
