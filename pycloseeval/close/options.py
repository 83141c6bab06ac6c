"""
Sides and schemes for close evaluation

A scheme object fully describes how a Close_Evaluator works:
    Standard_Scheme:      compensated barycentric value, and derivative by
                          barycentric interpolation of the Schneider-Werner
                          nodal derivative
    Near_Singular_Scheme: pole-regularized exterior form, derivative of the
                          barycentric interpolant with close node/target pairs
                          recomputed in cancellation-free form
"""

import enum

from ..backend_defaults import close_parameters, check_delta
from ..exceptions import Invalid_Argument_Error

class Side(str, enum.Enum):
    INTERIOR = 'i'
    EXTERIOR = 'e'

def parse_side(side):
    """
    Accepts a Side, or one of the strings 'i', 'e', 'interior', 'exterior'
    """
    if isinstance(side, Side):
        return side
    if isinstance(side, str):
        key = side.lower()
        if key in ('i', 'interior'):
            return Side.INTERIOR
        if key in ('e', 'exterior'):
            return Side.EXTERIOR
    raise Invalid_Argument_Error("side must be 'i' (interior) or 'e' "
                                        "(exterior); got " + repr(side))

class Standard_Scheme(object):
    near_singular = False
    def __repr__(self):
        return 'Standard_Scheme()'

class Near_Singular_Scheme(object):
    """
    Options for the near-singular corrected scheme

    Parameters:
        delta,        optional, float,   node/target distance below which the
            value difference is recomputed in cancellation-free form; defaults
            to close_parameters['delta'] (1e-2). delta=0 recomputes it for
            every pair
        inside_point, optional, complex, point deep inside the curve, used for
            exterior targets; if not given, the inside_point of the boundary
            is used
        backend,      optional, str,     'numpy' or 'numba' for the close pair
            corrections; chosen by size if not given
    """
    near_singular = True
    def __init__(self, delta=None, inside_point=None, backend=None):
        self.delta = close_parameters['delta'] if delta is None \
                                                    else check_delta(delta)
        self.inside_point = None if inside_point is None else complex(inside_point)
        if backend not in (None, 'numpy', 'numba'):
            raise Invalid_Argument_Error("Requested correction backend '" + \
                            str(backend) + "' is not an implemented backend.")
        self.backend = backend
    def __repr__(self):
        return 'Near_Singular_Scheme(delta={!r}, inside_point={!r}, ' \
            'backend={!r})'.format(self.delta, self.inside_point, self.backend)

def parse_scheme(options):
    """
    None selects the Standard_Scheme
    """
    if options is None:
        return Standard_Scheme()
    if isinstance(options, (Standard_Scheme, Near_Singular_Scheme)):
        return options
    raise Invalid_Argument_Error('options must be a Standard_Scheme or a '
                                    'Near_Singular_Scheme; got ' + repr(options))
