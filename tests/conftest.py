import os
import logging

import pytest

import molcat as mc


def transition_line(
        freq : float,
        err : float = 0.05,
        lgint : float = -5.0,
        dr : int = 3,
        elo : None | float = 0.0,
        gup : int = 3,
        tag : int = 28001,
        qnfmt : int = 101,
        qn : str = '  1           0',
    ) -> str:
    """
    A transition line laid out as in the JPL and COLOGNE catalogs (F13.4, F8.4, F8.4, I2, F10.4, I3, I7, I4, quantum numbers)
    """
    energy = ' '*10 if elo is None else f'{elo:10.4f}'
    return f'{freq:13.4f}{err:8.4f}{lgint:8.4f}{dr:2d}{energy}{gup:3d}{tag:7d}{qnfmt:4d}{qn}'


def write_lines(path, lines):
    with open(path, 'w') as f:
        for line in lines:
            f.write(line + '\n')


@pytest.fixture
def catalog_root(tmp_path):
    """
    Catalog root with JPL and COLOGNE sub-directories
    """
    for kind in mc.CatalogKind:
        os.makedirs(tmp_path / kind.directory_name)
    return tmp_path


@pytest.fixture
def make_catalog(catalog_root):
    """
    Returns a function that writes a "catdir.cat" and transitions files for a catalog kind and
    returns a `SpectralCatalog` reading from the catalog root.
    """
    def _make(kind, directory_lines, transition_files, **kwargs):
        kind_dir = catalog_root / kind.directory_name
        write_lines(kind_dir / 'catdir.cat', directory_lines)
        for file_name, lines in transition_files.items():
            write_lines(kind_dir / file_name, lines)
        return mc.SpectralCatalog(str(catalog_root), **kwargs)
    return _make


@pytest.fixture
def co_lines():
    return [
        transition_line(100000.0, elo=0.0, qn='  1           0'),
        transition_line(100010.0, elo=5.0, qn='  2           1'),
        transition_line(100020.0, elo=10.0, qn='  3           2'),
        transition_line(100030.0, elo=20.0, qn='  4           3'),
    ]


@pytest.fixture
def co_catalog(make_catalog, co_lines):
    return make_catalog(
        mc.CatalogKind.JPL,
        [' 28001 CO', ' 18003 H2O'],
        {'c028001.cat' : co_lines, 'c018003.cat' : [transition_line(22235.08, tag=18003)]},
    )


@pytest.fixture
def pkg_caplog(caplog):
    """
    `caplog` that also sees records of the package logger, which does not propagate to root
    """
    pkg_lgr = logging.getLogger('molcat')
    pkg_lgr.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger='molcat')
    yield caplog
    pkg_lgr.removeHandler(caplog.handler)
