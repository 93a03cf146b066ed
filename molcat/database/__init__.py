from __future__ import annotations

# flake8: noqa

from . import datatypes
from . import data_holders

from .catalog_protocol import LineCatalogProtocol
from .line_database.jpl_cologne import SpectralCatalog, FileProbe
