# vim: set expandtab shiftwidth=4 softtabstop=4:

# === UCSF ChimeraX Copyright ===
# Copyright 2022 Regents of the University of California. All rights reserved.
# This software is provided pursuant to the ChimeraX license agreement, which
# covers academic and commercial uses. For more information, see
# <http://www.rbvi.ucsf.edu/chimerax/docs/licensing.html>
#
# This file is part of the ChimeraX library. You can also redistribute and/or
# modify it under the GNU Lesser General Public License version 2.1 as
# published by the Free Software Foundation. For more details, see
# <https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html>
#
# This file is distributed WITHOUT ANY WARRANTY; without even the implied
# warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. This notice
# must be embedded in or attached to all copies, including partial copies, of
# the software or any revisions or derivations thereof.
# === UCSF ChimeraX Copyright ===

'''
point: Multidimensional points
==============================

A Point holds an ordered list of values, one per dimension, and supports
element-wise addition and subtraction of points, multiplication and
division by a scalar, equality and approximate equality.

Values can be of any numeric type that supports the operations used,
for example int, float, fractions.Fraction, decimal.Decimal or numpy
scalars.  All values of a point are expected to be of the same type.

Dimensions are numbered from 1 in get_value() and set_value(), so the
first coordinate of a point p is p.get_value(1).
'''

import logging
from operator import index as _as_index

from .errors import DimensionOutOfRangeError, DimensionMismatchError

_log = logging.getLogger(__name__)


class Point:
    '''
    A point in an n-dimensional space.  The number of dimensions is fixed
    when the point is created.  Points are only modified by set_value(),
    arithmetic operators always return a new Point.
    '''
    def __init__(self, values=()):
        '''
        Supported API.
        Create a point holding a copy of the values of a sequence or iterable.
        '''
        self._values = list(values)
        self._dim = len(self._values)	# Cached, always len(self._values)

    @classmethod
    def new(cls, dimension, element_type=int):
        '''
        Supported API.
        Create a point of the given dimension with every value set to the
        default value of element_type, that is element_type() (0 for int).
        '''
        dimension = _as_index(dimension)
        if dimension < 0:
            raise ValueError('Point dimension must be non-negative, got %d' % dimension)
        return cls([element_type() for i in range(dimension)])

    @classmethod
    def new_from_vec(cls, values):
        '''Supported API. Create a point from a sequence of values, one per dimension.'''
        return cls(values)

    def copy(self):
        return Point(self._values)

    def get_vector(self):
        '''
        Supported API.
        Return the list of point values.  This is the list held by the point,
        not a copy, and must not be modified.  Use set_value() to change a value.
        '''
        return self._values

    def get_size(self):
        '''Supported API. Return the number of dimensions.'''
        return self._dim

    def get_value(self, dim_index):
        '''
        Supported API.
        Return the value in dimension dim_index, counting from 1.
        Raises DimensionOutOfRangeError if dim_index is smaller than 1 or
        bigger than the point dimension.
        '''
        i = self._check_valid_dim(dim_index)
        return self._values[i - 1]

    def set_value(self, dim_index, value):
        '''
        Supported API.
        Replace the value in dimension dim_index, counting from 1.
        Raises DimensionOutOfRangeError like get_value().
        '''
        i = self._check_valid_dim(dim_index)
        self._values[i - 1] = value

    def _check_valid_dim(self, dim_index):
        i = _as_index(dim_index)
        if i < 1 or i > self._dim:
            _log.debug('dimension index %d outside 1..%d', i, self._dim)
            raise DimensionOutOfRangeError(i, self._dim)
        return i

    def _check_same_dim(self, other, operation):
        if self._dim != other._dim:
            _log.debug('cannot %s points of dimension %d and %d',
                       operation, self._dim, other._dim)
            raise DimensionMismatchError(self._dim, other._dim, operation)

    def apply_func(self, other, f):
        '''
        Supported API.
        Call f(a, b) for each pair of values a, b of this point and other
        in the same dimension, in dimension order, and return a list of the
        results.  Raises DimensionMismatchError if the dimensions differ.
        '''
        self._check_same_dim(other, 'apply function to')
        return [f(a, b) for a, b in zip(self._values, other._values)]

    def array(self, dtype=None):
        '''
        Supported API.
        Return the values as a new one-dimensional numpy array.
        '''
        from numpy import array
        return array(self._values, dtype)

    def __len__(self):
        return self._dim

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return 'Point(%r)' % (self._values,)

    def __add__(self, other):
        '''Supported API. Add values in each dimension.'''
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dim(other, 'add')
        return Point([a + b for a, b in zip(self._values, other._values)])

    def __sub__(self, other):
        '''Supported API. Subtract values of other from values of this point in each dimension.'''
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dim(other, 'subtract')
        return Point([a - b for a, b in zip(self._values, other._values)])

    def __mul__(self, scalar):
        '''Supported API. Multiply each value by a scalar.'''
        if isinstance(scalar, Point):
            return NotImplemented
        return Point([a * scalar for a in self._values])

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        '''
        Supported API.
        Divide each value by a scalar.  Division by zero is not checked,
        the result is whatever the value type gives, ZeroDivisionError for
        Python numbers, inf or nan for numpy floating point values.
        '''
        if isinstance(scalar, Point):
            return NotImplemented
        return Point([a / scalar for a in self._values])

    def __floordiv__(self, scalar):
        '''Supported API. Floor divide each value by a scalar, keeping integer values integral.'''
        if isinstance(scalar, Point):
            return NotImplemented
        return Point([a // scalar for a in self._values])

    def __eq__(self, other):
        '''
        Supported API.
        Points are equal if they have the same dimension and equal values
        in every dimension.  Points of different dimension are not equal.
        '''
        if not isinstance(other, Point):
            return NotImplemented
        return (self._dim == other._dim and
                all(a == b for a, b in zip(self._values, other._values)))

    # Mutable, so not usable as a dictionary key.
    __hash__ = None

    def close(self, other, epsilon):
        '''
        Supported API.
        Return whether the points are within epsilon of each other in every
        dimension, abs(a - b) <= epsilon.  Points of different dimension are
        never close.
        '''
        if self._dim != other._dim:
            return False
        return all(abs(a - b) <= epsilon for a, b in zip(self._values, other._values))
