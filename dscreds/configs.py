from pathlib import Path

PACKAGE_ROOT = Path(__file__).parent.absolute()
TEMPLATES_PATH = PACKAGE_ROOT / 'templates'
CREDENTIALS_FILE_NAME = 'credentials.yml'
CREDENTIALS_JSON_SCHEMA = TEMPLATES_PATH / 'credentials_schema.json'
SAMPLE_CREDENTIALS_FILE = TEMPLATES_PATH / CREDENTIALS_FILE_NAME

DEFAULT_VALIDATE_CREDENTIALS = False
VALIDATE_CREDENTIALS_ENVAR = 'DSCREDS_VALIDATE_CREDENTIALS'

REDACTED_VALUE = '***'
