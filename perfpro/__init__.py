__version__ = '0.1.0'

from perfpro.threedp import decode
from perfpro.tcx import serialize
