LOGGING_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOGGING_CLI_FORMAT = '%(asctime)s | %(message)s'
LOGGING_CLI_WARNING_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'
LOGGING_FILE_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
