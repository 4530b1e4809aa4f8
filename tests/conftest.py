from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# SUPERNOVAS Imports
from supernovas.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete each environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield

    # Make sure every test starts from the packaged defaults
    BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="floor_sub_nanoseconds")
def _floorSubNanoseconds(monkeypatch: pytest.MonkeyPatch) -> None:
    """Switch the sub-nanosecond policy to flooring for a single test."""
    monkeypatch.setattr(BehavioralConfig.getConfig().time, "SubNanosecondPolicy", "floor")
