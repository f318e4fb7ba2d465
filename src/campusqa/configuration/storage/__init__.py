# src/campusqa/configuration/storage/__init__.py
"""Storage configurations for campus-qa."""

from campusqa.configuration.storage.local import LocalStorage

__all__ = ["LocalStorage"]
