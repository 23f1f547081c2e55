r"""
=========
SortedSet
=========

SortedSet is a python package providing a set that always iterates over its
members in ascending order.

Configuration
=============

.. list-table:: SortedSet configuration options
   :widths: 25 25 50 150
   :header-rows: 1

   * - Option name
     - Default value
     - Type
     - Description
   * - ``repr_limit``
     - ``50``
     - int
     - Maximum number of members shown by the representation of a set


Definitions
===========
"""

__version__ = '0.3.0'

import sortedset.config as config


class SortedSetConfiguration(config.Configuration):
    repr_limit = config.Option(
        50,
        'Maximum number of members shown by the representation of a set',
    )


conf = SortedSetConfiguration()

from .sorted_set import (  # noqa: E402
    ImmutableStateError,
    IncomparableElementsError,
    InvalidElementError,
    SortedSet,
    SortedSetError,
)

__all__ = [
    'ImmutableStateError',
    'IncomparableElementsError',
    'InvalidElementError',
    'SortedSet',
    'SortedSetError',
    'conf',
]
