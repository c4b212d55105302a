"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_tree,
    make_plugin_catalog,
    make_po_catalog,
    make_request,
)

__all__ = [
    "make_locale_tree",
    "make_plugin_catalog",
    "make_po_catalog",
    "make_request",
]
