import os


class Config:
    """
    Configuration class for environment variables and default settings.
    """

    # Link-local instance metadata service; only the API version is tunable
    METADATA_URL = "http://169.254.169.254/metadata/instance"
    METADATA_API_VERSION = os.environ.get("METADATA_API_VERSION", "2017-08-01")
    METADATA_TIMEOUT_SECONDS = float(os.environ.get("METADATA_TIMEOUT_SECONDS", "2.0"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")
