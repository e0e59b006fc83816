#!/usr/bin/env python3
# coding: utf-8
"""Convenient objects about meta-programming and logging.
"""

import logging
from functools import wraps
from time import time

from complexn.lib.backend import np


class BraceMessage:
    def __init__(self, fmt, *args, **kwargs):
        self.fmt = fmt
        self.args = args
        self.kwargs = kwargs

    def __str__(self):
        return self.fmt.format(*self.args, **self.kwargs)


__ = BraceMessage


def time_this(func):
    @wraps(func)
    def _time_this(*args, **kwargs):
        start = time()
        r = func(*args, **kwargs)
        end = time()
        logging.debug(
            __('{}.{} : {}', func.__module__, func.__name__, end - start)
        )
        return r

    return _time_this


def ieee754(func):
    """Evaluate `func` with numpy floating point errors ignored, so that
    results follow IEEE-754 (inf, nan, signed zero) without warnings.

    A fresh ``np.errstate`` is entered on every call; recursive calls are
    safe.
    """
    @wraps(func)
    def _ieee754(*args, **kwargs):
        with np.errstate(all='ignore'):
            return func(*args, **kwargs)

    return _ieee754


class Parameters(object):
    """Plain record of keyword parameters.

    Subclasses declare the accepted names and their defaults as class
    attributes; unknown names are reported and ignored.  Instances are
    read-only, `replace` derives a new one.
    """
    def __init__(self, **kwargs):
        for name, value in kwargs.items():
            if hasattr(type(self), name):
                object.__setattr__(self, name, value)
            else:
                logging.warning(__('No configuration "{}"!', name))

    def as_dict(self):
        return {
            name: getattr(self, name) for name in dir(type(self))
            if not name.startswith('_') and
            not callable(getattr(type(self), name))
        }

    def __setattr__(self, name, value):
        raise AttributeError(
            "Cannot set {} on {}; use replace().".format(name, type(self).__name__)
        )

    def __delattr__(self, name):
        raise AttributeError(
            "Cannot delete {} on {}.".format(name, type(self).__name__)
        )

    def replace(self, **kwargs):
        """Return a copy with some parameters changed."""
        params = self.as_dict()
        params.update(kwargs)
        return type(self)(**params)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__,
            ', '.join('{}={!r}'.format(k, v)
                      for k, v in sorted(self.as_dict().items()))
        )
