#!/usr/bin/env python3
# coding: utf-8
r"""Read complex numbers from text.

Accepted forms, optionally enclosed in one pair of parentheses::

    1.5             real
    2i, -j, i3      imaginary (marker before or after the number)
    1.5, -2         real and imaginary, list separator ``,`` or ``;``
    1.5-2i, 2i+1.5  sum of a real and an imaginary part

Exponents (``1e-5``) and the symbols of `FormatOptions` for NaN and the
infinities are recognized.
"""

import logging
import re

from complexn.lib.backend import FLOAT, np
from complexn.lib.exceptions import ComplexFormatError, UndefinedArgumentError
from complexn.lib.tools import __
from complexn.number import ComplexNumber
from complexn.text.options import DEFAULT_OPTIONS

_MARKERS = frozenset('iIjJ')
_SIGNS = ('+', '-')


def tokenize(text, options=None):
    """Split `text` around separators, signs, NaN/infinity symbols and
    imaginary markers, keeping them as tokens.
    """
    options = DEFAULT_OPTIONS if options is None else options
    keywords = options.separators() + [
        options.nan_symbol,
        options.negative_infinity_symbol,
        options.positive_infinity_symbol,
    ]
    keywords = [k for k in keywords if k] + list(_SIGNS)
    pattern = '({}|[iIjJ])'.format('|'.join(re.escape(k) for k in keywords))
    tokens = [t.strip() for t in re.split(pattern, text)]
    return [t for t in tokens if t]


class _Reader(object):
    """Cursor over the tokens of one complex number."""
    def __init__(self, tokens, options):
        self.tokens = tokens
        self.options = options
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def next(self):
        token = self.peek()
        if token is None:
            raise ComplexFormatError("Unexpected end of complex number.")
        self.pos += 1
        return token

    def at_end(self):
        return self.pos >= len(self.tokens)

    def at_delimiter(self):
        token = self.peek()
        return (token is None or token in _SIGNS or
                token in self.options.separators())

    def read_part(self):
        """Read ``[+][-][marker]number[marker]``.

        Returns
        -------
        (value, imaginary) : (float, bool)
        """
        if self.peek() == '+':
            self.next()
        negative = False
        if self.peek() == '-':
            self.next()
            negative = True
        imaginary = False
        if self.peek() in _MARKERS:
            self.next()
            imaginary = True
            if self.at_delimiter():
                return (FLOAT(-1.) if negative else FLOAT(1.)), True
        value = self.read_number()
        if self.peek() in _MARKERS:
            if imaginary:
                raise ComplexFormatError(
                    "Imaginary marker on both sides of a number."
                )
            self.next()
            imaginary = True
        return (-value if negative else value), imaginary

    def read_number(self):
        options = self.options
        token = self.next()
        if token == options.nan_symbol:
            return FLOAT(np.nan)
        elif token == options.positive_infinity_symbol:
            return FLOAT(np.inf)
        elif token == options.negative_infinity_symbol:
            return FLOAT(-np.inf)
        text = token
        # the tokenizer splits exponents as in 1e, -, 5
        if (token[-1] in 'eE' and self.peek() in _SIGNS and
                self.pos + 1 < len(self.tokens)):
            text = token + self.next() + self.next()
        if options.decimal_separator != '.':
            text = text.replace(options.decimal_separator, '.')
        try:
            return FLOAT(float(text))
        except ValueError as e:
            raise ComplexFormatError(
                "Cannot read {!r} as a number.".format(text)
            ) from e


def parse(text, options=None):
    """Read a complex number from `text`.

    Parameters
    ----------
    text : str
    options : FormatOptions, optional

    Returns
    -------
    z : ComplexNumber

    Raises
    ------
    UndefinedArgumentError
        If `text` is ``None``.
    ComplexFormatError
        If `text` is not a complex number.
    """
    options = DEFAULT_OPTIONS if options is None else options
    if text is None:
        raise UndefinedArgumentError("Cannot parse None as a complex number.")
    s = text.strip()
    if not s:
        raise ComplexFormatError("Cannot parse an empty string.")
    if s.startswith('('):
        if not s.endswith(')'):
            raise ComplexFormatError(
                "Unbalanced parenthesis in {!r}.".format(text)
            )
        s = s[1:-1]

    tokens = tokenize(s, options)
    logging.debug(__('Tokens of {!r}: {}', text, tokens))
    if not tokens:
        raise ComplexFormatError("No number in {!r}.".format(text))

    reader = _Reader(tokens, options)
    left, left_imaginary = reader.read_part()
    if reader.at_end():
        if left_imaginary:
            return ComplexNumber(0., left)
        return ComplexNumber(left, 0.)

    if reader.peek() in options.separators():
        reader.next()
        if left_imaginary:
            raise ComplexFormatError(
                "Imaginary marker before the list separator in {!r}."
                .format(text)
            )
        right, _ = reader.read_part()
        z = ComplexNumber(left, right)
    else:
        right, right_imaginary = reader.read_part()
        if left_imaginary == right_imaginary:
            raise ComplexFormatError(
                "Need exactly one imaginary part in {!r}.".format(text)
            )
        z = ComplexNumber(right, left) if left_imaginary else \
            ComplexNumber(left, right)

    if not reader.at_end():
        raise ComplexFormatError(
            "Unexpected {!r} in {!r}.".format(reader.peek(), text)
        )
    return z


def try_parse(text, options=None):
    """Like `parse`, but ``None`` instead of an error."""
    try:
        return parse(text, options)
    except (ComplexFormatError, UndefinedArgumentError) as e:
        logging.debug(__('Cannot parse {!r}: {}', text, e))
        return None
