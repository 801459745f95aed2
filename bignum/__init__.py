#
# Arbitrary-precision integer, decimal floating point and complex arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from .context import *
from .bigint import *
from .textformat import *
from .bigfloat import *
from .bigcomplex import *


__all__ = (context.__all__ + bigint.__all__ + textformat.__all__ + bigfloat.__all__
           + bigcomplex.__all__)

__version__ = '1.0'
