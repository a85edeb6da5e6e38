# -*- coding: utf-8 -*-

"""Top-level package for simplesum."""

__author__ = """simplesum developers"""
__version__ = '0.1.0'

from .exceptions import WrongArgumentsError
from .module2 import SimpleClass2
