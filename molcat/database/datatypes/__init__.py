from . import fixed_width
from .molecule_entry import MoleculeDirectoryEntry, get_molecule_file_name
