"""
Tests for configuration objects.
"""

import os

import pytest
from crossbrowser.config import (
    DATA_PATH_ENV,
    DEFAULT_DATA_PATH,
    DEFAULT_OPTIONS,
    DatasetConfig,
    OutputStyle,
    RenderOptions,
)


def test_default_options():
    assert DEFAULT_OPTIONS.style is OutputStyle.EXPANDED
    assert DEFAULT_OPTIONS.precision == 5
    assert not DEFAULT_OPTIONS.compressed


def test_compressed_flag():
    assert RenderOptions(style=OutputStyle.COMPRESSED).compressed


def test_options_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_OPTIONS.precision = 2


def test_default_data_path_is_bundled():
    assert os.path.isfile(DEFAULT_DATA_PATH)
    assert DatasetConfig().data_path == DEFAULT_DATA_PATH


def test_from_env_without_variable(monkeypatch):
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    assert DatasetConfig.from_env() == DatasetConfig()


def test_from_env_blank_variable(monkeypatch):
    monkeypatch.setenv(DATA_PATH_ENV, "   ")
    assert DatasetConfig.from_env().data_path == DEFAULT_DATA_PATH
