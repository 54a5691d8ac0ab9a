import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    COSMOS_DB_CONNECTION_STRING: str = ""
    COSMOS_DB_ENDPOINT: str = ""
    COSMOS_DB_KEY: str = ""
    COSMOS_DB_DATABASE: str = "EmployeeScreening"
    COSMOS_DB_EMPLOYEES_CONTAINER: str = "Employees"

    REDIS_URL: str = ""
    CACHE_IN_MEMORY: bool = False
    CACHE_TTL_SECONDS: int = 30 * 60

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
