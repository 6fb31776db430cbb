import importlib

import pytest
import structlog

import geocoding.logging_config
from geocoding.logging_config import configure_logging


@pytest.fixture
def reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


def test_import_keeps_host_configuration(reset_structlog):
    def marker(logger, method_name, event_dict):
        return event_dict

    structlog.configure(processors=[marker])
    importlib.reload(geocoding.logging_config)
    importlib.import_module("geocoding.geocoder.geocoder")
    assert structlog.get_config()["processors"] == [marker]


def test_configure_logging_sets_processors(reset_structlog):
    configure_logging("debug")
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_configure_logging_rejects_unknown_level(reset_structlog):
    with pytest.raises(ValueError):
        configure_logging("FOO")
