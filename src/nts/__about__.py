"""Metadata for nts package."""

from __future__ import annotations

__title__ = "nts"
__package_name__ = "nts"
__description__ = "Bulk-manage Subversion working copies from a JSON file"
__version__ = "0.1.0"
__author__ = "nts contributors"
__github__ = "https://github.com/nts-svn/nts"
__docs__ = "https://github.com/nts-svn/nts#readme"
__tracker__ = "https://github.com/nts-svn/nts/issues"
__pypi__ = "https://pypi.org/project/nts/"
__email__ = ""
__license__ = "MIT"
__copyright__ = "Copyright 2013- nts contributors"
