from .base import FixedWidthField, AsciiColumnFormat, ColumnFormatMeta
from .jpl_cologne import FormatJplCologne
