import logging
import os
from shutil import copyfile

import click

from dscreds.configs import CREDENTIALS_FILE_NAME, SAMPLE_CREDENTIALS_FILE
from dscreds.core.credentials_parser import CredentialsParser
from dscreds.core.printable_result import printable_profiles
from dscreds.exceptions import CredentialValidationError
from dscreds.logger import Logger

CREDENTIALS_DEFAULT = os.path.join(os.getcwd(), CREDENTIALS_FILE_NAME)


@click.group()
@click.option('-v', '--verbosity', count=True,
              help='Verbosity option: -v for debug logging')
@click.option('--debug', '-d', is_flag=True, default=False, help='Set log level to debug')
def cli(debug: bool, verbosity: int):
    """dscreds manages datasource credentials for reporting platform connections."""
    log_engine = Logger()
    log_engine.initialize_logger()

    log_level = logging.INFO
    if debug or verbosity > 0:
        log_level = logging.DEBUG

    log_engine.set_log_level(log_level)


@cli.command()
@click.argument('path', default=os.getcwd(), type=click.Path(exists=True))
def init(path: click.Path) -> None:
    """generates a sample credentials.yml file in the current directory.

    Args:
        path: The full or relative path to where the file should be generated, defaults to current dir.
    """

    logger = logging.getLogger(__name__)
    destination = os.path.join(path, CREDENTIALS_FILE_NAME)

    if os.path.isfile(destination):
        message = "cannot generate sample file, already exists in target directory."
        logger.error(message)
        raise ValueError(message)
    try:
        copyfile(SAMPLE_CREDENTIALS_FILE, destination)
        logger.info("sample file created in directory %s", os.path.abspath(path))
    except OSError as exc:
        logger.error("failed to generate sample file: %s", exc)
        raise exc


@cli.command()
@click.option(
    '--credentials-file',
    type=click.Path(
        exists=True),
    default=CREDENTIALS_DEFAULT,
    help="where dscreds will look for your credentials file, default is ./credentials.yml")
def show(credentials_file: click.Path) -> None:
    """List the datasources in a credentials file, secrets redacted."""
    configuration = CredentialsParser().from_file_or_path(credentials_file)
    click.echo(printable_profiles(configuration.datasources))


@cli.command()
@click.option(
    '--credentials-file',
    type=click.Path(
        exists=True),
    default=CREDENTIALS_DEFAULT,
    help="where dscreds will look for your credentials file, default is ./credentials.yml")
def validate(credentials_file: click.Path) -> None:
    """Check that every datasource in a credentials file has all of its fields."""
    configuration = CredentialsParser().from_file_or_path(credentials_file)
    logger = logging.getLogger(__name__)
    for profile in configuration.datasources:
        try:
            profile.credentials.validate()
        except CredentialValidationError as exc:
            logger.error("datasource %s failed validation: %s", profile.name, exc)
            raise exc
    click.echo(f"{len(configuration.datasources)} datasource credential(s) valid.")
