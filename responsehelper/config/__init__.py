"""Configuration module."""

from responsehelper.config.settings import DetailsPolicy, ResponseHelperSettings

__all__ = [
    "DetailsPolicy",
    "ResponseHelperSettings",
]
