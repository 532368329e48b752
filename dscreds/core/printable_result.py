from typing import List

from tabulate import tabulate

from dscreds.core.credentials_parser import DatasourceProfile


def format_credential_data(credential_data: dict) -> str:
    if not credential_data:
        return '-'
    return '\n'.join(f'{key}: {value}' for key, value in credential_data.items())


def printable_profiles(profiles: List[DatasourceProfile]) -> str:
    """Renders datasource profiles as a table, secrets redacted.

    Args:
        profiles: the datasource profiles to render.
    Returns:
        formatted table output.
    """
    headers = ('datasource',
               'credential type',
               'credential data',)
    rows = [(profile.name,
             str(profile.credentials.credential_type),
             format_credential_data(profile.credentials.redacted_credential_data()),)
            for profile in profiles]

    return "\n\nDATASOURCE CREDENTIALS:\n\n" + \
        tabulate(rows, headers) + "\n"
