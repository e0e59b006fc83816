#!/usr/bin/env python3
# coding: utf-8
"""Errors raised at the boundaries of the package.

The arithmetic core never raises for numeric reasons; it returns IEEE
sentinels. Only text, cast and domain boundaries raise.
"""


class ComplexNumberError(Exception):
    pass


class ComplexFormatError(ComplexNumberError, ValueError):
    """Malformed complex number text or rejected format specification."""


class UndefinedArgumentError(ComplexNumberError, TypeError):
    """A required argument is ``None``."""


class ComplexCastError(ComplexNumberError, TypeError):
    """An object cannot be interpreted as a complex number."""


class ComplexDomainError(ComplexNumberError, ValueError):
    """Argument outside the domain of a function."""
