from __future__ import annotations

from typing import NamedTuple

import logging
_lgr = logging.getLogger(__name__)
_lgr.setLevel(logging.INFO)


TAG_WIDTH : int = 6


def get_molecule_file_name(mol : str) -> str:
    """
    Name of the transitions file of a molecule, given its line in "catdir.cat" (or just its tag).
    
    Only the first 6 characters are considered, the first whitespace delimited token of those
    is the tag, which is left padded with zeros to 6 digits. E.g. "32 506 ..." -> "c000032.cat"
    """
    if len(mol) > TAG_WIDTH:
        mol = mol[:TAG_WIDTH].strip()
    tokens = mol.split()
    tag = tokens[0] if len(tokens) != 0 else ''
    return f'c{tag:0>{TAG_WIDTH}}.cat'


class MoleculeDirectoryEntry(NamedTuple):
    line : str
    tag : str
    file_name : str
    
    @classmethod
    def from_line(cls, line : str) -> MoleculeDirectoryEntry:
        tokens = line[:TAG_WIDTH].split()
        return cls(line, tokens[0] if len(tokens) != 0 else '', get_molecule_file_name(line))
    
    @property
    def description(self) -> str:
        """
        Everything after the tag, i.e. the molecule name and whatever metadata the catalog gives
        """
        return self.line[self.line.find(self.tag) + len(self.tag):].strip()
    
    @property
    def label(self) -> str:
        return f'Molecule{{{self.tag} : {self.description}}}'
