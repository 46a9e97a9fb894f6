"""Settings for the ambient logging stack."""

from ghii_yaml_loader.config.settings import LoaderSettings, get_settings

__all__ = [
    "LoaderSettings",
    "get_settings",
]
