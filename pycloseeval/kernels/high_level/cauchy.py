"""
This submodule provides higher-level wrappers for the Cauchy Kernel Functions

These are naive (uncompensated) quadratures of the Cauchy integral; they lose
accuracy as targets approach the boundary, and are kept as a baseline for
the close evaluators in pycloseeval.close
"""

import numpy as np

from ...backend_defaults import get_backend
from ...point_set import as_point_set
from ...close.options import Side, parse_side
from ..low_level.cauchy import Cauchy_Kernel_Apply, Cauchy_Kernel_Form

################################################################################
# Applies

def Cauchy_Layer_Apply(source, target, dipstr, side='i', backend='fly'):
    """
    Cauchy Layer Apply
    Computes the sum:
        u_i = +-1/(2i*pi) * sum_j cw_j*p_j/(z_j-t_i)
    with the sign + for interior targets and - for exterior targets

    Parameters:
        source,   required, Boundary,      source coordinates (z_j)
        target,   required, PointSet,      target coordinates (t_i)
        dipstr,   required, complex(ns),   boundary values (p_j)
        side,     optional, str,           'i' or 'e'
        backend,  optional, str,           'fly', 'numba', 'numexpr'
            cw_j are the complex_weights in the boundary source

    This function assumes that source and target have no coincident points
    """
    target = as_point_set(target)
    sign = 1.0 if parse_side(side) is Side.INTERIOR else -1.0
    backend = get_backend(source.N, target.N, backend)
    return sign*Cauchy_Kernel_Apply(
                source  = source.c,
                target  = target.c,
                dipstr  = np.asarray(dipstr, dtype=complex),
                weights = source.complex_weights,
                backend = backend,
            )

def Cauchy_Layer_Form(source, target, side='i'):
    """
    Cauchy Layer Form

    Parameters:
        source, required, Boundary, source
        target, required, PointSet, target
        side,   optional, str,      'i' or 'e'
    This function assumes that source and target have no coincident points
    """
    target = as_point_set(target)
    sign = 1.0 if parse_side(side) is Side.INTERIOR else -1.0
    return sign*Cauchy_Kernel_Form(
                source  = source.c,
                target  = target.c,
                weights = source.complex_weights,
            )
