#!/usr/bin/env python
"""Manage multiple Subversion working copies from a JSON file.

:license: MIT, see LICENSE for details
"""

# Set default logging handler to avoid "No handler found" warnings.
from __future__ import annotations

import logging
from logging import NullHandler

from . import cli

logging.getLogger(__name__).addHandler(NullHandler())
