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

"""
errors: point dimension errors
==============================

Both errors derive from a builtin exception so callers can also catch
them as IndexError or ValueError.
"""

class DimensionOutOfRangeError(IndexError):
    """Dimension index (1-based) is below 1 or above the point dimension"""

    def __init__(self, index, dimension, msg=None):
        if msg is None:
            if index < 1:
                msg = "dimension index starts from 1 (%d < 1)" % index
            else:
                msg = "dimension index %d is bigger than %d (point dimension)" % (index, dimension)
        IndexError.__init__(self, msg)
        self.index = index
        self.dimension = dimension

class DimensionMismatchError(ValueError):
    """Two points combined element-wise have different dimensions"""

    def __init__(self, dimension, other_dimension, operation=None):
        msg = "dimensions are not equal (%d != %d)" % (dimension, other_dimension)
        if operation:
            msg += ", can't %s" % operation
        ValueError.__init__(self, msg)
        self.dimension = dimension
        self.other_dimension = other_dimension
