import logging
import re
from enum import Enum
from typing import Union

from dscreds.exceptions import UnknownCredentialType

logger = logging.getLogger(__name__)


def _fold(val: str) -> str:
    return re.sub(r'[\s_\-]', '', val).lower()


class CredentialType(Enum):
    """Discriminator for the supported datasource authentication modes.

    Values are the names the reporting platform uses for each mode.
    """
    ANONYMOUS = 'Anonymous'
    SERVICE_PRINCIPAL = 'ServicePrincipal'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, val: Union[str, 'CredentialType']) -> 'CredentialType':
        """Finds the credential type matching a value or member name.

        Matching ignores case, spaces, dashes and underscores, so
        `ServicePrincipal`, `service_principal` and `SERVICE-PRINCIPAL` all
        resolve to the same member.

        Args:
            val: the credential type value, member name or member itself.
        Returns:
            The matching :class:`CredentialType`, raises
            :class:`UnknownCredentialType <dscreds.exceptions.UnknownCredentialType>`
            when nothing matches.
        """
        if isinstance(val, cls):
            return val
        if isinstance(val, str):
            folded = _fold(val)
            for credential_type in cls:
                if folded in (_fold(credential_type.value), _fold(credential_type.name)):
                    return credential_type
        logger.critical('No credential type found by the name of %s', val)
        raise UnknownCredentialType(
            f'{val!r} is not a known credential type, expected one of '
            f'{", ".join(member.value for member in cls)}.')
