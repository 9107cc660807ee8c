"""Audit GitHub dependencies referenced by a manifest for low popularity."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
