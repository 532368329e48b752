from dscreds.core.models.credential_types import CredentialType
from dscreds.core.models.credentials import (AnonymousCredentials,
                                             CredentialsBase,
                                             ServicePrincipalCredentials,
                                             SPrincipalCredentials,
                                             build_credentials, variant_for)
