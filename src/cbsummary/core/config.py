# src/cbsummary/core/config.py

import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

_TRUTHY = ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- HTTP client variables ---
    # httpx applies a 5 second timeout by default; keep the same numbers unless overridden.
    DEFAULT_TIMEOUT_CONNECT = float(os.getenv("CBSUMMARY_TIMEOUT_CONNECT", "5.0"))
    DEFAULT_TIMEOUT_READ = float(os.getenv("CBSUMMARY_TIMEOUT_READ", "5.0"))
    USER_AGENT = os.getenv("CBSUMMARY_USER_AGENT", "cbsummary")

    # --- Polling variables ---
    POLL_CONCURRENCY = int(os.getenv("CBSUMMARY_POLL_CONCURRENCY", "1"))

    # --- Report variables ---
    OUTPUT_PREFIX = "cbsummary.out"

    # VERIFY_CERTS and CA_CERT are resolved at access time so that the CLI
    # flags and tests can change the environment after import.
    @property
    def VERIFY_CERTS(self) -> bool:
        return os.getenv("CBSUMMARY_VERIFY_CERTS", "True").lower() in _TRUTHY

    @property
    def CA_CERT(self) -> str:
        return os.getenv("CBSUMMARY_CA_CERT", "")

    def validate_instance(self):
        if self.POLL_CONCURRENCY < 1:
            raise ValueError("CBSUMMARY_POLL_CONCURRENCY must be at least 1.")
        if self.DEFAULT_TIMEOUT_CONNECT <= 0 or self.DEFAULT_TIMEOUT_READ <= 0:
            raise ValueError("CBSUMMARY_TIMEOUT_CONNECT and CBSUMMARY_TIMEOUT_READ must be positive.")
        if self.CA_CERT and not os.path.isfile(self.CA_CERT):
            raise ValueError(f"CBSUMMARY_CA_CERT points to a missing file: {self.CA_CERT}")


# Instantiate the config to be imported by other modules.
# The CLI validates it before any cluster is contacted.
config = Config()
