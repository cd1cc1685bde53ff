import os

DEFAULT_ENV = "development"

# APP_ENV spellings accepted per settings module.
_ALIASES = {
    "development": ("development", "dev", "local"),
    "testing": ("testing", "test", "ci"),
    "production": ("production", "prod"),
}


def get_settings_module() -> str:
    """Map ``APP_ENV`` to ``config.<module>``; unknown values use development."""
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    for module, aliases in _ALIASES.items():
        if env in aliases:
            return f"config.{module}"
    return f"config.{DEFAULT_ENV}"
