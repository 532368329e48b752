import copy

import pytest

from dscreds.configs import VALIDATE_CREDENTIALS_ENVAR
from dscreds.core.models import ServicePrincipalCredentials
from tests.conftest_modules.test_credentials import CREDENTIALS


@pytest.fixture(autouse=True)
def validation_unset(monkeypatch):
    """keeps the runner environment from toggling validation"""
    monkeypatch.delenv(VALIDATE_CREDENTIALS_ENVAR, raising=False)


@pytest.fixture
def enable_validation(monkeypatch):
    monkeypatch.setenv(VALIDATE_CREDENTIALS_ENVAR, 'true')


@pytest.fixture
def stub_creds():
    def _stub_creds():
        return copy.deepcopy(CREDENTIALS)
    return _stub_creds


@pytest.fixture
def stub_service_principal():
    return ServicePrincipalCredentials('tenant-1', 'client-abc', 'secret-xyz')
