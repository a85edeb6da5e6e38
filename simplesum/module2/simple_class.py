# -*- coding: utf-8 -*-
"""
Copyright simplesum developers
"""

import logging
import sys

logger = logging.getLogger(__name__)


class SimpleClass2:
    """Stateless adder of two integers.

    >>> my_object = SimpleClass2()
    """

    def sum(self, a: int, b: int) -> int:
        """
        Add `a` and `b`.

        :param a: first operand.
        :param b: second operand.
        :return: `a` + `b`.

        >>> my_object = SimpleClass2()
        >>> my_object.sum(1, 2)
        3
        >>> my_object.sum(-3, -4)
        -7
        """
        return a + b


if __name__ == '__main__':
    from simplesum.logger_init import logger_init

    logger_init(sys.argv[1:])
    test = SimpleClass2()
    logger.info('sum(42, 51) = %d', test.sum(42, 51))
