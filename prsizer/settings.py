from .conf.settings import Settings


def get_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        pydantic.ValidationError: If an input is malformed
    """
    return Settings()
