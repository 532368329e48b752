import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Dict, FrozenSet, Mapping, Optional, Type, Union

from dscreds.configs import REDACTED_VALUE
from dscreds.core.models.credential_types import CredentialType
from dscreds.core.utils import validation_enabled
from dscreds.exceptions import CredentialValidationError, UnknownCredentialType

logger = logging.getLogger(__name__)

TENANT_ID = 'tenantId'
SERVICE_PRINCIPAL_CLIENT_ID = 'servicePrincipalClientId'
SERVICE_PRINCIPAL_SECRET = 'servicePrincipalSecret'

_VARIANTS: Dict[CredentialType, Type['CredentialsBase']] = {}


@dataclass(frozen=True)
class CredentialsBase:
    """Root of every datasource credential variant.

    Concrete variants declare their discriminator when they are defined::

        class AnonymousCredentials(CredentialsBase,
                                   credential_type=CredentialType.ANONYMOUS):
            ...

    Classes without a credential type are abstract and cannot be
    instantiated. The typed dataclass fields are the canonical
    representation, `credential_data` is an export view of them keyed by
    the names the reporting platform expects.
    """
    credential_type: ClassVar[Optional[CredentialType]] = None
    # dataclass attribute -> credential data key
    FIELD_KEYS: ClassVar[Mapping[str, str]] = MappingProxyType({})
    SECRET_KEYS: ClassVar[FrozenSet[str]] = frozenset()

    def __init_subclass__(cls,
                          credential_type: Optional[CredentialType] = None,
                          **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if credential_type is None:
            return
        if credential_type in _VARIANTS:
            raise ValueError(f'Credential type {credential_type} is already registered '
                             f'to {_VARIANTS[credential_type].__name__}.')
        cls.credential_type = credential_type
        _VARIANTS[credential_type] = cls

    def __new__(cls, *args, **kwargs):  # noqa pylint: disable=unused-argument
        if cls.credential_type is None:
            raise TypeError(f"Can't instantiate {cls.__name__}, it does not declare a credential type.")
        return super().__new__(cls)

    def __post_init__(self) -> None:
        if validation_enabled():
            self.validate()

    @property
    def credential_data(self) -> Mapping[str, str]:
        """The credential fields keyed by their credential data names."""
        return MappingProxyType({key: getattr(self, attr)
                                 for attr, key in self.FIELD_KEYS.items()})

    def redacted_credential_data(self) -> Dict[str, str]:
        """credential data safe for logs and console output."""
        return {key: REDACTED_VALUE if key in self.SECRET_KEYS else value
                for key, value in self.credential_data.items()}

    def validate(self) -> 'CredentialsBase':
        """Checks every field is present (not None and not empty).

        Returns:
            the instance itself. Raises
            :class:`CredentialValidationError <dscreds.exceptions.CredentialValidationError>`
            naming the first missing field.
        """
        for attr, key in self.FIELD_KEYS.items():
            value = getattr(self, attr)
            if value is None or value == '':
                logger.error('Invalid %s credentials: %s cannot be null or empty.',
                             self.credential_type, key)
                raise CredentialValidationError(key, 'cannot be null or empty')
        return self

    @classmethod
    def from_credential_data(cls, credential_data: Mapping[str, str]) -> 'CredentialsBase':
        """Builds an instance from its credential data view.

        The keys must be exactly the ones the variant exports.
        """
        expected = set(cls.FIELD_KEYS.values())
        for key in sorted(set(credential_data) - expected):
            logger.error('Unexpected credential data key %s for %s.', key, cls.__name__)
            raise CredentialValidationError(key, f'is not a {cls.__name__} field')
        for key in sorted(expected - set(credential_data)):
            logger.error('Missing credential data key %s for %s.', key, cls.__name__)
            raise CredentialValidationError(key, 'is required')
        return cls(**{attr: credential_data[key] for attr, key in cls.FIELD_KEYS.items()})


@dataclass(frozen=True)
class AnonymousCredentials(CredentialsBase, credential_type=CredentialType.ANONYMOUS):
    """Anonymous datasource credentials."""


@dataclass(frozen=True)
class SPrincipalCredentials(CredentialsBase):
    """Field group shared by service principal based credentials.

    Values are stored verbatim. Empty strings are accepted unless
    validation is enabled, see :func:`dscreds.core.utils.validation_enabled`.
    """
    tenant_id: str
    service_principal_client_id: str
    service_principal_secret: str = field(repr=False)

    FIELD_KEYS: ClassVar[Mapping[str, str]] = MappingProxyType({
        'tenant_id': TENANT_ID,
        'service_principal_client_id': SERVICE_PRINCIPAL_CLIENT_ID,
        'service_principal_secret': SERVICE_PRINCIPAL_SECRET,
    })
    SECRET_KEYS: ClassVar[FrozenSet[str]] = frozenset((SERVICE_PRINCIPAL_SECRET,))


@dataclass(frozen=True)
class ServicePrincipalCredentials(SPrincipalCredentials,
                                  credential_type=CredentialType.SERVICE_PRINCIPAL):
    """tenant id, client id and client secret based credentials for service
    principal authentication."""


def variant_for(credential_type: Union[str, CredentialType]) -> Type[CredentialsBase]:
    """Locates the credentials class registered for a credential type."""
    credential_type = CredentialType.from_string(credential_type)
    try:
        return _VARIANTS[credential_type]
    except KeyError as err:
        logger.critical('No credentials class registered for %s', credential_type)
        raise UnknownCredentialType(
            f'No credentials class registered for {credential_type}.') from err


def build_credentials(credential_type: Union[str, CredentialType],
                      credential_data: Optional[Mapping[str, str]] = None) -> CredentialsBase:
    """Builds credentials of the given type from their credential data.

    Args:
        credential_type: value or name of a :class:`CredentialType`.
        credential_data: the credential data keys and values, omitted for
            variants without fields.
    Returns:
        the constructed credentials.
    """
    variant = variant_for(credential_type)
    logger.debug('building %s from credential data', variant.__name__)
    return variant.from_credential_data(credential_data or {})
