"""
molcat: readers for the JPL and COLOGNE (CDMS) molecular spectroscopy line catalogs.
"""
from .cfg import logs

from . import Data
from . import enums
from . import exceptions
from . import database

from .enums import CatalogKind
from .exceptions import MolcatError, NotFoundError, FormatError, TruncationWarning
from .database import SpectralCatalog
from .database.datatypes import get_molecule_file_name, MoleculeDirectoryEntry
from .database.datatypes.fixed_width import FixedWidthField, FormatJplCologne

__version__ = "1.0.0"
