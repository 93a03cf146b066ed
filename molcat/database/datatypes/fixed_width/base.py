from __future__ import annotations

import inspect
from typing import Type, Any, NamedTuple
from collections import namedtuple

import logging
_lgr = logging.getLogger(__name__)
_lgr.setLevel(logging.INFO)


def str_to_type(s) -> Type:
    if s == 'int':
        return int
    elif s=='float':
        return float
    elif s=='str':
        return str
    raise TypeError(f'Fixed width fields can only hold "int", "float" or "str" values, not "{s}"')


class FixedWidthField(NamedTuple):
    """
    A named column range of a fixed width text record.

    `start` and `end` are 1-indexed and inclusive, as they are written in catalog
    documentation. I.e. `FixedWidthField(1, 13, 'FREQUENCY')` is the first 13 characters.
    """
    start : int
    end : int
    name : str

    @classmethod
    def create(cls, start : int, end : int, name : str) -> FixedWidthField:
        if start < 1:
            raise ValueError(f'Field "{name}" must start at column 1 or later, not {start}')
        if end < start:
            raise ValueError(f'Field "{name}" ends (column {end}) before it starts (column {start})')
        return cls(start, end, name)

    @property
    def width(self) -> int:
        return self.end - self.start + 1

    def raw(self, record : str) -> str:
        """
        Untrimmed text of this field in `record`. Short records give whatever part of the
        field is present, records ending before `start` give an empty string.
        """
        if self.start - 1 >= len(record):
            return ''
        return record[self.start-1:self.end]

    def extract(self, record : str) -> str:
        """
        Trimmed text of this field in `record`, never fails on short records.
        """
        return self.raw(record).strip()


class ColumnFormatMeta(type):
    """
    Automatically add attributes needed to support being a column format class, which is a
    class that describes a fixed width text record and can read records in that format.

    Attributes added automatically:

        _attrs : tuple[str,...]
            The names of attributes of the record the format class describes.

        _fields : tuple[FixedWidthField,...]
            Column range of each attribute, in declaration order.

        _field_map : dict[str, FixedWidthField]
            Maps each attribute name (and its upper case form) to its column range.

        _types : tuple[Type, ...]
            The types of the attributes of the record the format class describes.

        _record_length : int
            Last column used by any field.

        _record_type : NamedTuple
            The record type the format class describes. Named systematically from the
            name of the format class:

                1) If "Format" is in the name, it will be replaced with "Record"
                   (i.e. "FormatJplCologne" -> "RecordJplCologne")

                2) Otherwise, "_record" will be appended to the name of the format class.
    """

    def __new__(meta, name, bases, ctx):

        x = super().__new__(meta, name, bases, ctx)

        annotations = inspect.get_annotations(x)
        default_attrs = tuple(k for k,v in ctx.items() if (not k.startswith('_')) and isinstance(v, tuple))
        anno_attrs = tuple(k for k in annotations if not k.startswith('_'))

        for attr in anno_attrs:
            if attr not in default_attrs:
                raise AttributeError(f'Attribute "{attr}" has a type annotation but no column range')

        for attr in default_attrs:
            if attr not in anno_attrs:
                raise AttributeError(f'Attribute "{attr}" has a column range but no type annotation')

        attr_names = anno_attrs

        if 'Format' in name:
            record_type_name = name.replace('Format', 'Record')
        else:
            record_type_name = name + '_record'

        fields = tuple(FixedWidthField.create(ctx[attr][0], ctx[attr][1], attr.upper()) for attr in attr_names)

        x._attrs = attr_names
        x._fields = fields
        x._field_map = dict(
            [(attr, f) for attr, f in zip(attr_names, fields)]
            + [(f.name, f) for f in fields]
        )
        x._types = tuple(annotations[attr] if (not type(annotations[attr]) is str) else str_to_type(annotations[attr]) for attr in attr_names)
        x._record_length = max((f.end for f in fields), default=0)
        x._record_type = namedtuple(record_type_name, attr_names)

        return x


class AsciiColumnFormat(metaclass = ColumnFormatMeta):
    """
    A column format class for records stored as ascii text with every field at a fixed
    column range. Enables us to specify a format by laying out class-variables like a
    table with the following columns:

    attribute_name                     : type               = (first_column, last_column)

    ## Example ##

    ```
    class PointFormat(AsciiColumnFormat):
        x : float = (1, 5)
        y : float = (7, 14)
    ```

    Then `PointFormat.get_record_from_str("00001 00003450")` gives `PointRecord(x=1.0, y=3450.0)`
    and `PointFormat.read_field("00001 00003450", "Y")` gives `"00003450"`.

    Fields that need more than a plain type conversion can name a parser in `_value_parsers`,
    i.e. `_value_parsers = dict(x=my_parser)` makes `x` read as `my_parser(text_of_x)`.
    """
    _value_parsers = dict()

    def __init__(self):
        raise RuntimeError(f'Instances of class "{self.__class__.__name__}" cannot be created.')

    @classmethod
    def to_string(cls):
        a = f'{cls.__name__}\n\trecord_length = {cls._record_length}\n\trecord_type = {cls._record_type}\n'
        col_sizes = (
            max((len(a) for a in cls._attrs), default=0),
            max((len(t.__name__) for t in cls._types), default=0),
        )
        for attr, typ, f in zip(cls._attrs, cls._types, cls._fields):
            a += f'\t{attr: <{col_sizes[0]}} | {typ.__name__: <{col_sizes[1]}} | {f.start}-{f.end}\n'
        return a

    @staticmethod
    def get_value_from_str(typ : Type, s : str) -> Any:
        """
        Return the `typ` interpretation of the (trimmed) field text `s`. Blank numeric
        fields are `None`, unparseable ones raise `ValueError`.
        """
        if typ == str:
            return s
        if len(s) == 0:
            return None
        return typ(s)

    @classmethod
    def get_value_of_attr(cls, attr : str, typ : Type, s : str) -> Any:
        parser = cls._value_parsers.get(attr, None)
        if parser is not None:
            return parser(s)
        return cls.get_value_from_str(typ, s)

    @classmethod
    def get_record_type(cls) -> Type:
        """
        Returns the record type that the format class returns from `read_records` and `get_record_from_str`
        """
        return cls._record_type

    @classmethod
    def get_record_length(cls) -> int:
        return cls._record_length

    @classmethod
    def get_format_fields(cls) -> tuple[FixedWidthField,...]:
        """
        Returns the column range of each record attribute, in order
        """
        return cls._fields

    @classmethod
    def get_format_types(cls) -> tuple[Type,...]:
        return cls._types

    @classmethod
    def get_format_attrs(cls) -> tuple[str,...]:
        return cls._attrs

    @classmethod
    def field_exists(cls, name : str) -> bool:
        return name in cls._field_map

    @classmethod
    def get_field(cls, name : str) -> FixedWidthField:
        """
        Column range of the field called `name` (attribute name or upper case field name)
        """
        try:
            return cls._field_map[name]
        except KeyError:
            raise KeyError(f'Format "{cls.__name__}" has no field "{name}". Fields are {[f.name for f in cls._fields]}') from None

    @classmethod
    def read_field(cls, line : str, name : str) -> str:
        return cls.get_field(name).extract(line)

    @classmethod
    def read_float(cls, line : str, name : str) -> float:
        return float(cls.read_field(line, name))

    @classmethod
    def read_int(cls, line : str, name : str) -> int:
        return int(cls.read_field(line, name))

    @classmethod
    def get_record_from_str(cls, s : str):
        """
        Given a string `s`, will return a record created from that string
        """
        return cls._record_type(*(cls.get_value_of_attr(attr, typ, f.extract(s)) for attr, typ, f in zip(cls._attrs, cls._types, cls._fields)))

    @classmethod
    def read_records(cls, fpath : str) -> list:
        """
        Given a path to a file `fpath`, will return a list of records found in that file
        """
        i = 0
        records = []
        _lgr.info(f'Starting to read records using "{cls.__name__}" from "{fpath}"')
        with open(fpath, 'r', encoding='latin-1') as f:
            for a in f:
                a = a.rstrip('\r\n')
                if len(a) == 0 or a.isspace():
                    continue

                records.append(
                    cls.get_record_from_str(a)
                )

                if ((i % 10000) == 0):
                    _lgr.debug(f'read record {i} ...')
                i += 1
        _lgr.info(f'Completed reading {i} records using "{cls.__name__}" from "{fpath}"')

        return records
