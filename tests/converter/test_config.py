"""
Tests for converter.config
"""

import pytest

from layout_toolkit.converter.config import ConverterConfig, DEFAULT_MAX_DEPTH


def test_config_defaults():
    config = ConverterConfig()

    assert config.max_depth == DEFAULT_MAX_DEPTH == 64
    assert config.group_type == "Group"
    assert config.page_separator == ":"
    assert config.validate_nodes is True


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"max_depth": 0}, "max_depth"),
        ({"group_type": ""}, "group_type"),
        ({"page_separator": ""}, "page_separator"),
    ],
)
def test_config_invalid_values_raise(kwargs, message):
    with pytest.raises(ValueError, match=message):
        ConverterConfig(**kwargs)
