import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List, TextIO, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from dscreds.configs import CREDENTIALS_JSON_SCHEMA
from dscreds.core.models import CredentialsBase, build_credentials
from dscreds.core.utils import load_from_file_or_path, validation_enabled

if TYPE_CHECKING:
    from io import StringIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasourceProfile:
    name: str
    credentials: CredentialsBase


@dataclass(frozen=True)
class CredentialsConfiguration:
    version: str
    validate_credentials: bool
    datasources: List[DatasourceProfile]

    def get_profile(self, name: str) -> DatasourceProfile:
        """Finds the datasource profile by name, raises ValueError if missing."""
        for profile in self.datasources:
            if profile.name == name:
                return profile
        message = f'Credentials missing required datasource: {name}'
        logger.error(message)
        raise ValueError(message)


class CredentialsParser:

    def get_dict_from_anything(self,
                               dict_like_object: Union[str, Path, 'StringIO', dict],
                               schema_path: Path = CREDENTIALS_JSON_SCHEMA) -> dict:
        """Returns dict from path, io object or dict, checked against the schema.

        Returns:
            a formatted dict.
        """
        if isinstance(dict_like_object, dict):
            instance = dict_like_object
        else:
            instance = load_from_file_or_path(dict_like_object)
        return self._verify_schema(instance, schema_path)

    @staticmethod
    def _verify_schema(instance,
                       schema_path: Path) -> dict:
        logger.debug('Verifying credentials against %s', schema_path)
        with open(schema_path) as schema_file:  # noqa pylint: disable=unspecified-encoding
            schema = yaml.safe_load(schema_file.read())

        try:
            jsonschema.validate(instance=instance, schema=schema)
        except ValidationError as exc:
            # message only, the instance would carry the secrets
            logger.error('Invalid credentials file: %s', exc.message)
            raise exc

        return instance

    def from_file_or_path(
            self, loadable: Union[Path, str, TextIO, dict]) -> CredentialsConfiguration:
        """rips through a credentials file and returns a configuration object."""
        logger.debug('loading credentials...')
        loaded = self.get_dict_from_anything(loadable)
        logger.debug('Done loading.')

        validate = loaded.get('validate_credentials')
        if validate is None:
            validate = validation_enabled()

        datasources = []
        seen = set()
        for datasource in loaded['datasources']:
            name = datasource['name']
            if name in seen:
                message = f'Credentials contain duplicate datasource: {name}'
                logger.error(message)
                raise ValueError(message)
            seen.add(name)
            datasources.append(self._build_profile(datasource, validate))

        logger.info('Loaded credentials for %s datasource(s).', len(datasources))
        return CredentialsConfiguration(str(loaded['version']),
                                        validate,
                                        datasources)

    @staticmethod
    def _build_profile(datasource: dict,
                       validate: bool) -> DatasourceProfile:
        logger.debug('building credentials for datasource %s', datasource['name'])
        try:
            credentials = build_credentials(datasource['credential_type'],
                                            datasource.get('credential_data'))
            if validate:
                credentials.validate()
        except ValueError as exc:
            logger.error('Invalid credentials for datasource %s: %s', datasource['name'], exc)
            raise exc
        return DatasourceProfile(datasource['name'],
                                 credentials)
