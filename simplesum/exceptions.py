# -*- coding: utf-8 -*-
"""
Copyright simplesum developers
"""


class WrongArgumentsError(Exception):
    def __init__(self, message):
        super().__init__(message)
