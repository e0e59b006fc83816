#!/usr/bin/env python3
# coding: utf-8
"""Interface to logging package.
"""
import logging


class Logger(object):
    levels = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'critical': logging.CRITICAL
    }

    def __init__(self,
        name=None, level='info',
        stream_fmt=None,
        filename=None,
        file_fmt='%(message)s'
    ):
        """
        Parameters
        ----------
        name : str, optional
            Name of the configured logger. Default is the root logger,
            which receives the messages of this package.
        level : {'debug', 'info', 'warn', 'warning', 'error', 'critical'}
        stream_fmt : str, optional
            Add a stream handler with this format.
        filename : str, optional
            Add a file handler writing to this file.
        file_fmt : str, optional
        """
        if level not in self.levels:
            raise ValueError("Cannot recognize level {} as any in {}."
                             .format(level, list(self.levels.keys())))
        self.logger = logging.getLogger(name)
        self.logger.setLevel(self.levels[level])
        if stream_fmt is not None:
            sh = logging.StreamHandler()
            sh.setFormatter(logging.Formatter(stream_fmt))
            self.logger.addHandler(sh)
        if filename is not None:
            th = logging.FileHandler(filename=filename, mode='w', encoding='utf-8')
            th.setFormatter(logging.Formatter(file_fmt))
            self.logger.addHandler(th)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
