from __future__ import annotations

import dataclasses as dc
import threading

from molcat.enums import CatalogKind

import logging
_lgr = logging.getLogger(__name__)
_lgr.setLevel(logging.INFO)


@dc.dataclass(frozen=True, slots=True)
class TransitionCacheEntry:
    kind : CatalogKind
    molecule_file : str
    max_temperature : float
    min_intensity : float
    transitions : tuple[str,...]
    
    def matches(self, kind : CatalogKind, molecule_file : str, max_temperature : float, min_intensity : float) -> bool:
        return (
            self.kind == kind 
            and self.molecule_file == molecule_file 
            and self.max_temperature == max_temperature 
            and self.min_intensity == min_intensity
        )


class TransitionCache:
    """
    Holds the transitions of the last query, there is at most one entry at a time.
    
    The lock only keeps the slot itself consistent. Sharing a reader (and therefore its cache)
    between threads still needs the callers to serialise their queries, or one reader per worker.
    """
    def __init__(self):
        self._entry : None | TransitionCacheEntry = None
        self._lock = threading.Lock()
    
    def __repr__(self):
        return f'{self.__class__.__name__}(instance_id={id(self)}, entry={self.describe()})'
    
    def describe(self) -> str:
        entry = self._entry
        if entry is None:
            return 'empty'
        return f'{entry.kind.name}:{entry.molecule_file} (max_temperature={entry.max_temperature}, min_intensity={entry.min_intensity}, n={len(entry.transitions)})'
    
    @property
    def entry(self) -> None | TransitionCacheEntry:
        return self._entry
    
    def get(
            self, 
            kind : CatalogKind, 
            molecule_file : str, 
            max_temperature : float, 
            min_intensity : float
        ) -> None | tuple[str,...]:
        with self._lock:
            entry = self._entry
        if entry is not None and entry.matches(kind, molecule_file, max_temperature, min_intensity):
            _lgr.debug(f'Cache hit for {kind.name}:{molecule_file}')
            return entry.transitions
        _lgr.debug(f'Cache miss for {kind.name}:{molecule_file} (holding {self.describe()})')
        return None
    
    def put(
            self, 
            kind : CatalogKind, 
            molecule_file : str, 
            max_temperature : float, 
            min_intensity : float,
            transitions,
        ) -> TransitionCacheEntry:
        entry = TransitionCacheEntry(kind, molecule_file, max_temperature, min_intensity, tuple(transitions))
        with self._lock:
            if self._entry is not None:
                _lgr.debug(f'Replacing cached transitions {self.describe()}')
            self._entry = entry
        return entry
    
    def clear(self) -> None:
        with self._lock:
            self._entry = None
