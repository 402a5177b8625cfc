"""Exception types raised while loading or refreshing confusable tables.

Normalization and distance computation never raise for ``str`` input; only
the data side of the package has failure modes.
"""

from __future__ import annotations


class ConfusablesError(Exception):
    """Base class for confusable table errors."""


class ConfusablesDataError(ConfusablesError, ValueError):
    """A confusable table could not be parsed or decoded."""


class ConfusablesUpdateError(ConfusablesError):
    """Refreshing the bundled table from the Unicode source failed."""
