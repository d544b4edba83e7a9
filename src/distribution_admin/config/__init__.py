import os


def get_settings_module() -> str:
    # Environment is taken from APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "distribution_admin.config.production"

    if env in {"test", "testing"}:
        return "distribution_admin.config.testing"

    return "distribution_admin.config.development"
