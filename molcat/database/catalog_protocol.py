from __future__ import annotations

import os.path
from typing import Protocol, ClassVar

from molcat.enums import CatalogKind

import logging
_lgr = logging.getLogger(__name__)
_lgr.setLevel(logging.INFO)


class LineCatalogProtocol(Protocol):
    """
    Something that can look up molecules and their transitions in a line catalog held on disk.
    
    Transitions are returned as the catalog lines themselves, so callers can extract whichever
    fields they need with the catalog's fixed width format.
    """
    catalog_dir : ClassVar[str] = os.path.normpath("catalogs")
    
    @classmethod
    def set_catalog_dir(cls, catalog_dir : str):
        cls.catalog_dir = os.path.normpath(catalog_dir)
    
    def __repr__(self):
        """
        Returns a string that represents the current state of the class
        """
        return f'{self.__class__.__name__}(instance_id={id(self)}, catalog_dir={self.catalog_dir})'
    
    def purge_cache(self, directories : bool = False):
        raise NotImplementedError
    
    def get_molecule(
            self, 
            name : str, 
            kind : CatalogKind
        ) -> str:
        raise NotImplementedError
    
    def get_transition(
            self, 
            transition : str, 
            name : str, 
            kind : CatalogKind, 
            max_temperature : float = 0, 
            min_intensity : float = 0
        ) -> str:
        raise NotImplementedError
    
    def get_transitions(
            self, 
            transition : str, 
            name : str, 
            kind : CatalogKind, 
            width : float, 
            max_temperature : float = 0, 
            min_intensity : float = 0
        ) -> list[str]:
        raise NotImplementedError
