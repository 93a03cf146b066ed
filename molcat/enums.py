from __future__ import annotations

from enum import IntEnum

import logging
_lgr = logging.getLogger(__name__)
_lgr.setLevel(logging.INFO)


class CatalogKind(IntEnum):
    """
    Molecular spectroscopy catalog families that share the fixed width transition format.
    
    The two families differ in where their files live, in how many header lines precede
    the molecule list in "catdir.cat" and in how the upper state temperature of a
    transition is derived.
    """
    JPL = 0
    COLOGNE = 1
    
    @property
    def directory_name(self) -> str:
        """
        Name of the sub-directory (of the catalog root) holding the files of this catalog
        """
        return self.name
    
    @property
    def header_lines(self) -> int:
        """
        Number of lines at the start of "catdir.cat" that are not molecules
        """
        return 2 if self == CatalogKind.COLOGNE else 0
    
    @property
    def uses_frequency_correction(self) -> bool:
        """
        JPL upper state temperatures include the photon energy of the transition, COLOGNE ones do not.
        """
        return self == CatalogKind.JPL
    
    @classmethod
    def from_str(cls, s : str) -> CatalogKind:
        """
        Case insensitive lookup, accepts "CDMS" as an alias of COLOGNE.
        """
        key = s.strip().upper()
        if key == 'CDMS':
            key = 'COLOGNE'
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f'Unknown catalog kind "{s}", should be one of {[x.name for x in cls]}') from None
