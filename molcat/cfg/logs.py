"""
Configures logging for the package
"""
from __future__ import annotations

import logging

pkg_lgr = logging.getLogger(__name__.split('.',1)[0])
pkg_lgr.propagate = False

pkg_lgr.setLevel(logging.INFO)

pkg_stream_hdlr = logging.StreamHandler()
pkg_stream_hdlr.setLevel(logging.DEBUG)

pkg_stream_hdlr_formatter = logging.Formatter('%(levelname)s :: %(funcName)s :: %(filename)s-%(lineno)d :: %(message)s')
pkg_stream_hdlr.setFormatter(pkg_stream_hdlr_formatter)

pkg_lgr.addHandler(pkg_stream_hdlr)

_logger_levels : dict[str,list[int]] = dict()


def _child_loggers(_lgr : logging.Logger):
    """
    Loggers whose closest existing ancestor is `_lgr`. Modules of sub-packages that do not
    create a logger themselves are still found, however deep they are.
    """
    for name, child_lgr in list(logging.root.manager.loggerDict.items()):
        if isinstance(child_lgr, logging.PlaceHolder):
            continue
        if name.startswith(_lgr.name + '.') and child_lgr.parent is _lgr:
            yield child_lgr


def _apply_level(_lgr : logging.Logger, log_level : int, mode : str) -> None:
    if mode == 'exact':
        _lgr.setLevel(log_level)
    elif mode == 'max':
        if _lgr.level > log_level:
            _lgr.setLevel(log_level)
    elif mode == 'min':
        if _lgr.level < log_level:
            _lgr.setLevel(log_level)
    else:
        raise ValueError(f'{__name__}: Unknown mode "{mode}", should be one of ("exact", "min", "max")')


def set_packagewide_level(log_level : int, mode : str = 'exact', _lgr : logging.Logger = pkg_lgr):
    """
    Sets the logging level for the whole package at once.
    
    ## ARGUMENTS ##
        log_level : int
            Level (e.g. logging.DEBUG) that all loggers in the package should be set to
        
        mode : str{'exact', 'min', 'max'} = 'exact'
            How the level should be set. 
                'exact' - set all loggers to the passed `log_level`
                'min' - raise loggers below `log_level` up to `log_level`
                'max' - lower loggers above `log_level` down to `log_level`
        
        _lgr : logging.Logger = pkg_lgr
            The highest logger in the logging hierarchy that will be affected.
    
    ## RETURNS ##
        None
    """
    _apply_level(_lgr, log_level, mode)
    
    for child_lgr in _child_loggers(_lgr):
        set_packagewide_level(log_level, mode, child_lgr)


def push_packagewide_level(log_level : int, mode : str = 'exact', _lgr : logging.Logger = pkg_lgr):
    """
    As `set_packagewide_level(...)`, but remembers the previous level of every affected
    logger so it can be restored with `pop_packagewide_level()`.
    """
    level_stack = _logger_levels.get(_lgr.name, list())
    level_stack.append(_lgr.level)
    _logger_levels[_lgr.name] = level_stack
    
    _apply_level(_lgr, log_level, mode)
    
    for child_lgr in _child_loggers(_lgr):
        push_packagewide_level(log_level, mode, child_lgr)


def pop_packagewide_level(_lgr : logging.Logger = pkg_lgr) -> None:
    level_stack = _logger_levels.get(_lgr.name, list())
    if len(level_stack) != 0:
        _lgr.setLevel(level_stack.pop(-1))
        _logger_levels[_lgr.name] = level_stack
    
    for child_lgr in _child_loggers(_lgr):
        pop_packagewide_level(child_lgr)
