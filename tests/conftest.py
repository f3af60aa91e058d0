"""Shared fixtures for localefmt tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from localefmt.config import FormatSettings, reset_settings, set_settings
from localefmt.dates import DateValue


def _at(iso: str, offset: int) -> DateValue:
    """UTC instant read at a fixed offset (minutes east of UTC)."""
    moment = datetime.fromisoformat(iso).replace(tzinfo=timezone.utc)
    return DateValue.from_datetime(moment).with_offset(offset)


@pytest.fixture(autouse=True)
def utc_settings():
    """Pin "local time" to UTC so epoch and wall-clock tests are stable."""
    set_settings(FormatSettings(default_offset=0))
    yield
    reset_settings()


@pytest.fixture
def morning() -> DateValue:
    """2010-09-03 07:05:08 at UTC-5."""
    return _at("2010-09-03T12:05:08", -300)


@pytest.fixture
def noon() -> DateValue:
    """2010-09-03 12:05:08 at UTC-5."""
    return _at("2010-09-03T17:05:08", -300)


@pytest.fixture
def midnight() -> DateValue:
    """2010-09-03 00:05:08 at UTC-5."""
    return _at("2010-09-03T05:05:08", -300)


@pytest.fixture
def early_date() -> DateValue:
    """0001-09-03 00:05:08 at UTC-5."""
    return _at("0001-09-03T05:05:08", -300)
