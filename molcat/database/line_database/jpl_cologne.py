from __future__ import annotations

import os
import os.path
import warnings
from typing import ClassVar, NamedTuple

from molcat.enums import CatalogKind
from molcat.exceptions import NotFoundError, FormatError, TruncationWarning
from ..catalog_protocol import LineCatalogProtocol
from ..datatypes.molecule_entry import MoleculeDirectoryEntry, get_molecule_file_name
from ..datatypes.fixed_width.jpl_cologne import (
    FormatJplCologne,
    read_filter_values,
    upper_state_temperature,
)
from ..data_holders.transition_cache import TransitionCache
from ..data_holders.transition_data_holder import TransitionDataHolder

import logging
_lgr = logging.getLogger(__name__)
_lgr.setLevel(logging.INFO)


class FileProbe(NamedTuple):
    """
    Outcome of checking that a molecule's transitions file can be opened
    """
    ok : bool
    path : str
    reason : str = ''


class SpectralCatalog(LineCatalogProtocol):
    """
    Reader for the JPL and COLOGNE (CDMS) molecular spectroscopy catalogs.

    Expects a catalog root directory laid out as

    ```
    <catalog_dir>/JPL/catdir.cat
    <catalog_dir>/JPL/c<tag>.cat
    <catalog_dir>/COLOGNE/catdir.cat
    <catalog_dir>/COLOGNE/c<tag>.cat
    ```

    where "catdir.cat" lists one molecule per line (COLOGNE has two header lines first) and
    each "c<tag>.cat" holds the fixed width transition lines of one molecule (see `FormatJplCologne`).

    NOTE: Molecule directories are read once per catalog kind and kept for the lifetime of the
    instance. The transitions of the last query are kept in a single entry cache, a query with
    different (kind, molecule, max_temperature, min_intensity) replaces it. An instance is meant
    to be used by one thread at a time.

    NOTE: A `max_temperature` or `min_intensity` of exactly 0 means "do not filter" on that quantity.
    """

    catalog_dir : ClassVar[str] = os.path.normpath("catalogs")

    max_transitions : ClassVar[int] = 30000

    directory_file_name : ClassVar[str] = 'catdir.cat'

    # every byte decodes, stray bytes surface as unparseable fields
    file_encoding : ClassVar[str] = 'latin-1'


    @classmethod
    def set_max_transitions(cls, max_transitions : int):
        if max_transitions < 1:
            raise ValueError(f'Maximum number of transitions must be at least 1, not {max_transitions}')
        cls.max_transitions = int(max_transitions)


    def __init__(
            self,
            catalog_dir : None | str = None,
            max_transitions : None | int = None,
        ):
        _lgr.debug(f'Creating {self.__class__.__name__} with {catalog_dir=} {max_transitions=}')

        if catalog_dir is not None:
            self.catalog_dir = os.path.normpath(catalog_dir)
        if max_transitions is not None:
            if max_transitions < 1:
                raise ValueError(f'Maximum number of transitions must be at least 1, not {max_transitions}')
            self.max_transitions = int(max_transitions)

        self._directories : dict[CatalogKind, tuple[str,...]] = dict()
        self._cache = TransitionCache()


    def __repr__(self):
        """
        Returns a string that represents the current state of the class
        """
        return f'{self.__class__.__name__}(instance_id={id(self)}, catalog_dir={self.catalog_dir}, max_transitions={self.max_transitions}, cache={self._cache.describe()})'


    @property
    def cache(self) -> TransitionCache:
        return self._cache


    def purge_cache(self, directories : bool = False):
        """
        Forget the cached transitions, and the molecule directories as well if `directories` is True
        """
        self._cache.clear()
        if directories:
            self._directories.clear()


    get_molecule_file_name = staticmethod(get_molecule_file_name)


    def catalog_file(self, kind : CatalogKind, file_name : str) -> str:
        return os.path.join(self.catalog_dir, kind.directory_name, file_name)


    def probe_transitions_file(self, kind : CatalogKind, file_name : str) -> FileProbe:
        """
        Check a transitions file can be opened. Never raises, the outcome is in the returned `FileProbe`.
        """
        path = self.catalog_file(kind, file_name)
        try:
            with open(path, 'r', encoding=self.file_encoding):
                pass
        except FileNotFoundError:
            return FileProbe(False, path, 'not found')
        except OSError as e:
            return FileProbe(False, path, f'cannot be read: {e}')
        return FileProbe(True, path)


    ## Molecule directory ##

    def read_catalog(self, kind : CatalogKind) -> list[str]:
        """
        Lines of "catdir.cat" for `kind` whose transitions file exists and is readable.

        Molecules with a missing transitions file are logged and left out. A missing "catdir.cat"
        raises `FileNotFoundError`.
        """
        if kind not in self._directories:
            self._directories[kind] = tuple(self._read_directory_file(kind))
        return list(self._directories[kind])


    def _read_directory_file(self, kind : CatalogKind) -> list[str]:
        path = self.catalog_file(kind, self.directory_file_name)
        _lgr.info(f'Reading {kind.name} molecule directory "{path}"')

        molecules = []
        n_skipped = 0
        try:
            with open(path, 'r', encoding=self.file_encoding) as f:
                for _ in range(kind.header_lines):
                    f.readline()

                for line in f:
                    line = line.rstrip('\r\n')
                    if len(line) == 0 or line.isspace():
                        continue

                    probe = self.probe_transitions_file(kind, get_molecule_file_name(line))
                    if probe.ok:
                        molecules.append(line)
                    else:
                        _lgr.error(f'Transitions file "{probe.path}" {probe.reason}, molecule "{line.strip()}" will not be available')
                        n_skipped += 1
        except FileNotFoundError:
            _lgr.error(f'{kind.name} molecule directory "{path}" not found')
            raise

        _lgr.info(f'Found {len(molecules)} molecules in {kind.name} catalog ({n_skipped} without transitions file)')
        return molecules


    def get_molecule_entries(self, kind : CatalogKind) -> tuple[MoleculeDirectoryEntry,...]:
        return tuple(MoleculeDirectoryEntry.from_line(line) for line in self.read_catalog(kind))


    def find_molecule(self, name : str, kind : CatalogKind) -> str:
        """
        First directory line (in catalog order) that contains `name`, case sensitive.
        """
        for line in self.read_catalog(kind):
            if name in line:
                return line
        raise NotFoundError(f'molecule "{name}" not found in {kind.name} catalog.')


    def get_molecule(self, name : str, kind : CatalogKind) -> str:
        return self.find_molecule(name, kind)


    ## Transitions ##

    def read_transitions(
            self,
            molecule_file : str,
            kind : CatalogKind,
            max_temperature : float = 0,
            min_intensity : float = 0
        ) -> list[str]:
        """
        Lines of the transitions file `molecule_file` that pass the filters, in file order.

        ## ARGUMENTS ##
            molecule_file : str
                Name of the transitions file, e.g. "c028503.cat"
            kind : CatalogKind
                Catalog the file belongs to
            max_temperature : float = 0
                Only transitions with an upper state temperature below this (K) are kept. 0 keeps all.
            min_intensity : float = 0
                Only transitions with rint above this are kept. 0 keeps all.

        ## RETURNS ##
            transitions : list[str]
                At most `self.max_transitions` lines. If more would have passed the filters a
                `TruncationWarning` is issued (once) and reading stops.
        """
        path = self.catalog_file(kind, molecule_file)
        _lgr.info(f'Reading {kind.name} transitions from "{path}" with {max_temperature=} {min_intensity=}')

        transitions = []
        truncated = False
        try:
            with open(path, 'r', encoding=self.file_encoding) as f:
                for i, line in enumerate(f, start=1):
                    line = line.rstrip('\r\n')
                    if len(line) == 0 or line.isspace():
                        continue

                    try:
                        frequency, rint, energy = read_filter_values(line)
                    except ValueError as e:
                        raise FormatError(f'Cannot parse line {i} of "{path}": {e}') from e

                    temperature = upper_state_temperature(frequency, energy, kind)

                    if (rint > min_intensity or min_intensity == 0) and (temperature < max_temperature or max_temperature == 0):
                        if len(transitions) >= self.max_transitions:
                            truncated = True
                            break
                        transitions.append(line)
        except FileNotFoundError:
            _lgr.error(f'{kind.name} transitions file "{path}" not found')
            raise

        if truncated:
            msg = f'"{path}" has more than {self.max_transitions} transitions matching {max_temperature=} {min_intensity=}, only the first {self.max_transitions} are used'
            _lgr.warning(msg)
            warnings.warn(msg, TruncationWarning, stacklevel=2)

        _lgr.info(f'Read {len(transitions)} transitions from "{path}"')
        return transitions


    def _molecule_transitions(
            self,
            name : str,
            kind : CatalogKind,
            max_temperature : float,
            min_intensity : float
        ) -> tuple[str,...]:
        molecule_file = get_molecule_file_name(self.get_molecule(name, kind))

        transitions = self._cache.get(kind, molecule_file, max_temperature, min_intensity)
        if transitions is None:
            transitions = self._cache.put(
                kind,
                molecule_file,
                max_temperature,
                min_intensity,
                self.read_transitions(molecule_file, kind, max_temperature, min_intensity)
            ).transitions
        return transitions


    def get_transition(
            self,
            transition : str,
            name : str,
            kind : CatalogKind,
            max_temperature : float = 0,
            min_intensity : float = 0
        ) -> str:
        """
        First transition line of molecule `name` that contains `transition` (quantum numbers or
        frequency as written in the catalog).
        """
        for line in self._molecule_transitions(name, kind, max_temperature, min_intensity):
            if transition in line:
                return line
        raise NotFoundError(f'transition "{transition}" not found for molecule "{name}" in {kind.name} catalog.')


    def get_transitions(
            self,
            transition : str,
            name : str,
            kind : CatalogKind,
            width : float,
            max_temperature : float = 0,
            min_intensity : float = 0
        ) -> list[str]:
        """
        The transition found by `get_transition(...)` followed by every other transition of the
        molecule within `width`/2 MHz (inclusive) of it, in file order.
        """
        anchor = self.get_transition(transition, name, kind, max_temperature, min_intensity)
        anchor_frequency = FormatJplCologne.read_float(anchor, 'FREQUENCY')

        result = [anchor]
        for line in self._molecule_transitions(name, kind, max_temperature, min_intensity):
            if line == anchor:
                continue
            if abs(FormatJplCologne.read_float(line, 'FREQUENCY') - anchor_frequency) <= width * 0.5:
                result.append(line)
        return result


    def get_transitions_at_frequency(
            self,
            frequency : float,
            name : str,
            kind : CatalogKind,
            width : float,
            max_temperature : float = 0,
            min_intensity : float = 0
        ) -> list[str]:
        """
        Transitions of molecule `name` within `width`/2 MHz (inclusive) of `frequency` MHz. The
        closest one comes first, the rest follow in file order. Empty if none is close enough.

        A `frequency` of 0 returns all transitions that pass the filters.
        """
        transitions = self._molecule_transitions(name, kind, max_temperature, min_intensity)
        if frequency == 0:
            return list(transitions)

        in_window = []
        for i, line in enumerate(transitions):
            distance = abs(FormatJplCologne.read_float(line, 'FREQUENCY') - frequency)
            if distance <= width * 0.5:
                in_window.append((distance, i, line))

        if len(in_window) == 0:
            return []

        anchor = min(in_window)
        return [anchor[2]] + [line for _, i, line in in_window if i != anchor[1]]


    def get_transition_record(
            self,
            transition : str,
            name : str,
            kind : CatalogKind,
            max_temperature : float = 0,
            min_intensity : float = 0
        ):
        """
        As `get_transition(...)` but parsed into a `FormatJplCologne` record
        """
        line = self.get_transition(transition, name, kind, max_temperature, min_intensity)
        try:
            return FormatJplCologne.get_record_from_str(line)
        except ValueError as e:
            raise FormatError(f'Cannot parse transition "{line}" of molecule "{name}" in {kind.name} catalog: {e}') from e


    def get_transition_table(
            self,
            name : str,
            kind : CatalogKind,
            max_temperature : float = 0,
            min_intensity : float = 0
        ) -> TransitionDataHolder:
        """
        All transitions of molecule `name` that pass the filters, as arrays
        """
        return TransitionDataHolder.from_lines(self._molecule_transitions(name, kind, max_temperature, min_intensity), kind)


    def transition_temperature(self, line : str, kind : CatalogKind) -> float:
        """
        Upper state temperature (K) of a transition line, as used by the `max_temperature` filter
        """
        frequency, _, energy = read_filter_values(line)
        return upper_state_temperature(frequency, energy, kind)
