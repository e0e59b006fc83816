#!/usr/bin/env python3
# coding: utf-8
"""Symbols used to read and write complex numbers as text.
"""

from complexn.lib.tools import Parameters


class FormatOptions(Parameters):
    """Text conventions shared by the parser and the formatter.

    Parameters
    ----------
    imaginary_symbol : str
        Marker of the imaginary unit in `to_expression`.
    polar_angle_symbol : str
        Separator between magnitude and angle in polar output.
    list_separator : str
        Separator of the ``(re, im)`` form; ``;`` is always accepted too.
    decimal_separator : str
    nan_symbol : str
    positive_infinity_symbol : str
    negative_infinity_symbol : str
    """
    imaginary_symbol = 'i'
    polar_angle_symbol = 'A'
    list_separator = ','
    decimal_separator = '.'
    nan_symbol = 'NaN'
    positive_infinity_symbol = 'Infinity'
    negative_infinity_symbol = '-Infinity'

    alternate_list_separator = ';'

    def separators(self):
        """List separators accepted by the parser, decimal separator
        excluded.
        """
        seps = []
        for sep in (self.list_separator, self.alternate_list_separator):
            if sep and sep != self.decimal_separator and sep not in seps:
                seps.append(sep)
        return seps


DEFAULT_OPTIONS = FormatOptions()
