from __future__ import annotations

import string

from molcat.enums import CatalogKind
from molcat.Data import constants
from .base import AsciiColumnFormat, FixedWidthField


def decode_degeneracy(s : str) -> None | int:
    """
    Upper state degeneracy from the text of the GU column. The catalogs write values above 999
    with an upper case letter for the hundreds in the first column, A=10 ... Z=35, so "A01" is 1001.
    A blank field is `None`, anything else that is not a number raises `ValueError`.
    """
    s = s.strip()
    if len(s) == 0:
        return None
    if s[0] in string.ascii_uppercase:
        if len(s) != 3 or not s[1:].isdigit():
            raise ValueError(f'Invalid letter coded degeneracy "{s}"')
        return (string.ascii_uppercase.index(s[0]) + 10) * 100 + int(s[1:])
    return int(s)


class FormatJplCologne(AsciiColumnFormat):
    """
    Transition record of the JPL and COLOGNE (CDMS) molecular spectroscopy catalogs.
    Both families use the same columns for every molecule.
    
    NOTE: The published DEGREE_FREEDOM range (31-32) shares column 32 with the energy value, so
    energies of 10000 cm^{-1} or more put their leading digit into `degree_freedom`. Filtering
    uses `RINT_FIELD` and `ENERGY_FIELD` below, which are not affected.
    
    attribute name                     : type               = (first column, last column)
    """
    frequency                          : float              = (1, 13)     # MHz
    frequency_error                    : float              = (16, 21)    # MHz
    intensity                          : float              = (23, 29)    # log10 of integrated intensity ("rint")
    degree_freedom                     : int                = (31, 32)
    lower_state_energy                 : float              = (33, 41)    # cm^{-1}
    gu                                 : int                = (42, 44)    # letter coded above 999
    tag                                : int                = (46, 51)
    qn_coding                          : int                = (53, 55)
    qn                                 : str                = (56, 150)
    
    _value_parsers = dict(gu=decode_degeneracy)


FREQUENCY_INDEX = 0
FREQUENCY_ERROR_INDEX = 1
INTENSITY_INDEX = 2
DEGREE_FREEDOM_INDEX = 3
LOWER_STATE_ENERGY_INDEX = 4
GU_INDEX = 5
TAG_INDEX = 6
QN_CODING_INDEX = 7
QN_INDEX = 8

FIELD_NAMES : tuple[str,...] = tuple(f.name for f in FormatJplCologne.get_format_fields())


# The catalog's own definition of the numeric fields used for filtering. These are the full
# F8.4 and F10.4 columns, wider than the published INTENSITY and LOWER_STATE_ENERGY ranges so
# that a sign or leading digit in the first column is not lost.
RINT_FIELD = FixedWidthField(22, 29, 'INTENSITY')
ENERGY_FIELD = FixedWidthField(32, 41, 'LOWER_STATE_ENERGY')


def read_filter_values(line : str) -> tuple[float, float, float]:
    """
    Frequency (MHz), rint and energy (cm^{-1}) of a transition line. A blank energy is 0,
    unparseable values raise `ValueError`.
    """
    frequency = float(FormatJplCologne.read_field(line, 'FREQUENCY'))
    energy = ENERGY_FIELD.extract(line)
    if energy == '':
        energy = '0'
    rint = float(RINT_FIELD.extract(line))
    return frequency, rint, float(energy)


def upper_state_temperature(frequency : float, energy : float, kind : CatalogKind) -> float:
    """
    Temperature (K) needed to populate the upper level of a transition.
    
    JPL: photon energy of the transition plus the tabulated energy
    COLOGNE: tabulated energy only
    """
    if kind.uses_frequency_correction:
        return frequency * constants.hz_to_k * constants.mhz_to_hz + constants.cm_to_k * energy
    return constants.cm_to_k * energy
