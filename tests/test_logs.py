import logging

import pytest

import molcat as mc
from molcat.cfg import logs

NESTED_LOGGER_NAMES = (
    'molcat.database.line_database.jpl_cologne',
    'molcat.database.data_holders.transition_cache',
    'molcat.database.datatypes.fixed_width.base',
)


@pytest.fixture
def restore_levels():
    names = [name for name, lgr in logging.root.manager.loggerDict.items() if (name == 'molcat' or name.startswith('molcat.')) and not isinstance(lgr, logging.PlaceHolder)]
    levels = dict((name, logging.getLogger(name).level) for name in names)
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_package_logger_does_not_propagate():
    assert logs.pkg_lgr is logging.getLogger('molcat')
    assert not logs.pkg_lgr.propagate
    assert logs.pkg_stream_hdlr in logs.pkg_lgr.handlers


def test_set_packagewide_level_modes(restore_levels):
    pkg_lgr = logging.getLogger('molcat')
    child_lgr = logging.getLogger('molcat.enums')
    
    logs.set_packagewide_level(logging.WARNING)
    assert pkg_lgr.level == logging.WARNING
    assert child_lgr.level == logging.WARNING
    
    # 'max' only lowers levels that are above the given one
    logs.set_packagewide_level(logging.DEBUG, mode='max')
    assert child_lgr.level == logging.DEBUG
    logs.set_packagewide_level(logging.ERROR, mode='max')
    assert child_lgr.level == logging.DEBUG
    
    # 'min' only raises levels that are below the given one
    logs.set_packagewide_level(logging.INFO, mode='min')
    assert child_lgr.level == logging.INFO
    logs.set_packagewide_level(logging.DEBUG, mode='min')
    assert child_lgr.level == logging.INFO
    
    with pytest.raises(ValueError):
        logs.set_packagewide_level(logging.INFO, mode='loudest')


def test_packagewide_level_reaches_nested_modules(restore_levels):
    # the sub-packages holding these modules have no logger of their own
    for name in NESTED_LOGGER_NAMES:
        assert name in logging.root.manager.loggerDict
    assert isinstance(logging.root.manager.loggerDict['molcat.database'], logging.PlaceHolder)
    
    logs.set_packagewide_level(logging.DEBUG)
    assert dict((name, logging.getLogger(name).level) for name in NESTED_LOGGER_NAMES) == dict((name, logging.DEBUG) for name in NESTED_LOGGER_NAMES)
    
    logs.push_packagewide_level(logging.ERROR)
    assert all(logging.getLogger(name).level == logging.ERROR for name in NESTED_LOGGER_NAMES)
    
    logs.pop_packagewide_level()
    assert all(logging.getLogger(name).level == logging.DEBUG for name in NESTED_LOGGER_NAMES)


def test_cache_lookups_are_logged_at_debug(co_catalog, pkg_caplog, restore_levels):
    logs.set_packagewide_level(logging.DEBUG)
    
    co_catalog.get_transition('100010', 'CO', mc.CatalogKind.JPL)
    co_catalog.get_transition('100020', 'CO', mc.CatalogKind.JPL)
    
    cache_records = [r for r in pkg_caplog.records if r.name == 'molcat.database.data_holders.transition_cache']
    assert len(cache_records) >= 2
    assert all(r.levelno == logging.DEBUG for r in cache_records)


def test_push_and_pop_packagewide_level(restore_levels):
    pkg_lgr = logging.getLogger('molcat')
    child_lgr = logging.getLogger('molcat.enums')
    before = (pkg_lgr.level, child_lgr.level)
    
    logs.push_packagewide_level(logging.ERROR)
    assert (pkg_lgr.level, child_lgr.level) == (logging.ERROR, logging.ERROR)
    
    logs.push_packagewide_level(logging.DEBUG)
    assert child_lgr.level == logging.DEBUG
    
    logs.pop_packagewide_level()
    assert (pkg_lgr.level, child_lgr.level) == (logging.ERROR, logging.ERROR)
    
    logs.pop_packagewide_level()
    assert (pkg_lgr.level, child_lgr.level) == before
    
    # popping an empty stack leaves levels alone
    logs.pop_packagewide_level()
    assert (pkg_lgr.level, child_lgr.level) == before


def test_logs_reachable_from_package():
    assert mc.logs is logs
