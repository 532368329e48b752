import copy
from dataclasses import FrozenInstanceError

import pytest
from testfixtures import LogCapture

from dscreds.core.models import (AnonymousCredentials, CredentialsBase,
                                 CredentialType, ServicePrincipalCredentials,
                                 SPrincipalCredentials, build_credentials,
                                 variant_for)
from dscreds.exceptions import CredentialValidationError, UnknownCredentialType
from tests.common import rand_string

SERVICE_PRINCIPAL_KEYS = {'tenantId', 'servicePrincipalClientId', 'servicePrincipalSecret'}


def test_anonymous_credentials():
    creds = AnonymousCredentials()

    assert creds.credential_type == CredentialType.ANONYMOUS
    assert dict(creds.credential_data) == {}


def test_service_principal_credentials(stub_service_principal):
    assert stub_service_principal.credential_type == CredentialType.SERVICE_PRINCIPAL
    assert dict(stub_service_principal.credential_data) == {
        'tenantId': 'tenant-1',
        'servicePrincipalClientId': 'client-abc',
        'servicePrincipalSecret': 'secret-xyz',
    }


def test_service_principal_keyword_construction():
    creds = ServicePrincipalCredentials(tenant_id='tenant-1',
                                        service_principal_client_id='client-abc',
                                        service_principal_secret='secret-xyz')
    assert creds.tenant_id == 'tenant-1'
    assert creds.service_principal_client_id == 'client-abc'
    assert creds.service_principal_secret == 'secret-xyz'


def test_service_principal_data_has_exactly_its_keys():
    for _ in range(5):
        values = [rand_string(12) for _ in range(3)]
        creds = ServicePrincipalCredentials(*values)
        assert set(creds.credential_data) == SERVICE_PRINCIPAL_KEYS
        assert list(creds.credential_data.values()) == values


@pytest.mark.parametrize('value', ['', ' ', '\t\n'], ids=['empty', 'space', 'whitespace'])
def test_blank_values_stored_verbatim(value):
    creds = ServicePrincipalCredentials(value, value, value)
    assert dict(creds.credential_data) == {key: value for key in SERVICE_PRINCIPAL_KEYS}


def test_none_accepted_without_validation():
    creds = ServicePrincipalCredentials(None, 'client-abc', 'secret-xyz')
    assert creds.credential_data['tenantId'] is None


def test_repeated_reads_are_identical(stub_service_principal):
    assert stub_service_principal.credential_type is stub_service_principal.credential_type
    assert stub_service_principal.credential_data == stub_service_principal.credential_data
    assert dict(AnonymousCredentials().credential_data) == dict(AnonymousCredentials().credential_data)


def test_credentials_are_immutable(stub_service_principal):
    with pytest.raises(FrozenInstanceError):
        stub_service_principal.tenant_id = 'other'
    with pytest.raises(FrozenInstanceError):
        stub_service_principal.credential_type = CredentialType.ANONYMOUS
    with pytest.raises(TypeError):
        stub_service_principal.credential_data['tenantId'] = 'other'
    assert stub_service_principal.tenant_id == 'tenant-1'


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CredentialsBase()
    with pytest.raises(TypeError):
        SPrincipalCredentials('tenant-1', 'client-abc', 'secret-xyz')


def test_equality_and_hashing(stub_service_principal):
    same = ServicePrincipalCredentials('tenant-1', 'client-abc', 'secret-xyz')
    other = ServicePrincipalCredentials('tenant-2', 'client-abc', 'secret-xyz')

    assert stub_service_principal == same
    assert stub_service_principal != other
    assert len({stub_service_principal, same, other}) == 2
    assert AnonymousCredentials() == AnonymousCredentials()
    assert AnonymousCredentials() != stub_service_principal


def test_copies_keep_variant(stub_service_principal):
    copied = copy.deepcopy(stub_service_principal)
    assert copied == stub_service_principal
    assert copied.credential_type == CredentialType.SERVICE_PRINCIPAL


def test_repr_hides_secret(stub_service_principal):
    assert 'secret-xyz' not in repr(stub_service_principal)
    assert 'tenant-1' in repr(stub_service_principal)


def test_redacted_credential_data(stub_service_principal):
    assert stub_service_principal.redacted_credential_data() == {
        'tenantId': 'tenant-1',
        'servicePrincipalClientId': 'client-abc',
        'servicePrincipalSecret': '***',
    }
    assert AnonymousCredentials().redacted_credential_data() == {}


def test_explicit_validate(stub_service_principal):
    assert stub_service_principal.validate() is stub_service_principal
    assert AnonymousCredentials().validate() == AnonymousCredentials()

    creds = ServicePrincipalCredentials('tenant-1', '', 'secret-xyz')
    with pytest.raises(CredentialValidationError) as exc:
        creds.validate()
    assert exc.value.field_name == 'servicePrincipalClientId'
    assert exc.value.reason == 'cannot be null or empty'


@pytest.mark.parametrize('position, field_name', [
    (0, 'tenantId'),
    (1, 'servicePrincipalClientId'),
    (2, 'servicePrincipalSecret'),
])
@pytest.mark.parametrize('bad_value', ['', None])
def test_validation_on_construction(enable_validation, position, field_name, bad_value):
    values = ['tenant-1', 'client-abc', 'secret-xyz']
    values[position] = bad_value
    with pytest.raises(CredentialValidationError) as exc:
        ServicePrincipalCredentials(*values)
    assert exc.value.field_name == field_name


def test_validation_accepts_whitespace(enable_validation):
    creds = ServicePrincipalCredentials(' ', 'client-abc', 'secret-xyz')
    assert creds.tenant_id == ' '


def test_validation_failure_is_logged_without_secret(enable_validation):
    with LogCapture() as capture:
        with pytest.raises(CredentialValidationError):
            ServicePrincipalCredentials('tenant-1', 'client-abc', '')
    capture.check(
        ('dscreds.core.models.credentials', 'ERROR',
         'Invalid ServicePrincipal credentials: servicePrincipalSecret cannot be null or empty.'),
    )


def test_validation_disabled_by_flag(monkeypatch):
    monkeypatch.setenv('DSCREDS_VALIDATE_CREDENTIALS', 'off')
    creds = ServicePrincipalCredentials('', '', '')
    assert creds.tenant_id == ''


def test_from_credential_data():
    creds = ServicePrincipalCredentials.from_credential_data({
        'tenantId': 'tenant-1',
        'servicePrincipalClientId': 'client-abc',
        'servicePrincipalSecret': 'secret-xyz',
    })
    assert creds == ServicePrincipalCredentials('tenant-1', 'client-abc', 'secret-xyz')
    assert AnonymousCredentials.from_credential_data({}) == AnonymousCredentials()


def test_from_credential_data_rejects_unexpected_keys():
    with pytest.raises(CredentialValidationError) as exc:
        AnonymousCredentials.from_credential_data({'tenantId': 'tenant-1'})
    assert exc.value.field_name == 'tenantId'


def test_from_credential_data_rejects_missing_keys():
    with pytest.raises(CredentialValidationError) as exc:
        ServicePrincipalCredentials.from_credential_data({'tenantId': 'tenant-1',
                                                          'servicePrincipalClientId': 'client-abc'})
    assert exc.value.field_name == 'servicePrincipalSecret'
    assert exc.value.reason == 'is required'


def test_variant_for():
    assert variant_for(CredentialType.ANONYMOUS) is AnonymousCredentials
    assert variant_for('ServicePrincipal') is ServicePrincipalCredentials
    assert variant_for('service_principal') is ServicePrincipalCredentials
    with pytest.raises(UnknownCredentialType):
        variant_for('Basic')


def test_build_credentials():
    creds = build_credentials('ServicePrincipal', {'tenantId': 't',
                                                   'servicePrincipalClientId': 'c',
                                                   'servicePrincipalSecret': 's'})
    assert isinstance(creds, ServicePrincipalCredentials)
    assert creds.credential_data['servicePrincipalSecret'] == 's'
    assert build_credentials('anonymous') == AnonymousCredentials()


def test_duplicate_credential_type_registration():
    with pytest.raises(ValueError):
        class OtherAnonymous(CredentialsBase,  # noqa pylint: disable=unused-variable
                             credential_type=CredentialType.ANONYMOUS):
            pass
