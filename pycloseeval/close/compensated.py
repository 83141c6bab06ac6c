"""
Globally compensated barycentric close evaluation of Cauchy integrals

For a function v holomorphic inside a closed curve (or holomorphic outside
it and vanishing at infinity), the Cauchy integral
    v(t) = +-1/(2i*pi) * int v(y)/(y-t) dy
is discretized by the quadrature nodes x_j and complex speed weights cw_j,
and then divided by the same discretization applied to the function 1
(Ioakimidis et al. for interior targets, Helsing-Ojala for exterior):
    v(t) ~ I0/J0,  I0 = sum_j cw_j*v_j/(x_j-t),  J0 = sum_j cw_j/(x_j-t)
with J0 shifted by -2i*pi for exterior targets. The ratio is a barycentric
rational interpolant, so the errors in I0 and J0 cancel as t approaches the
curve, and the result is accurate to ~15 digits uniformly up to the curve.

For the derivative, v' is computed at the nodes by the Schneider-Werner
formula, and since v' is itself holomorphic, it is evaluated with the same
barycentric scheme. This gives ~14 digits for interior derivatives but only
~13 digits for exterior derivatives; see near_singular.py for a scheme that
gains back a digit.

Cost is O(NM) in time and memory. Targets should be blocked into reasonably
sized chunks by the caller if memory is a concern.
"""

import numpy as np

from .geometry import Close_Geometry
from .schneider_werner import Schneider_Werner_Derivative, Schneider_Werner_Form

def _barycentric(geometry, vb):
    I0 = geometry.comp.dot(vb)
    J0 = geometry.J0 if vb.ndim == 1 else geometry.J0[:,None]
    return I0/J0

def _replace_hits(geometry, u, nodal):
    u[geometry.hit_targets] = nodal[geometry.hit_nodes]

def Compensated_Cauchy_Apply(source, target_c, side, vb, derivative=False):
    """
    Compensated barycentric evaluation

    Parameters:
        source,     required, Boundary
        target_c,   required, complex(M),  target points
        side,       required, Side
        vb,         required, complex(N) or complex(N, n), boundary values
        derivative, optional, bool,        also compute v'
    Returns:
        if not derivative: v,        complex(M) or complex(M, n)
        if derivative:     (v, vp)   tuple of such arrays
    Targets lying exactly on a node get the nodal value (and the nodal
        Schneider-Werner derivative) exactly
    """
    geometry = Close_Geometry(source, target_c, side)
    u = _barycentric(geometry, vb)
    _replace_hits(geometry, u, vb)
    if not derivative:
        return u
    vbp = Schneider_Werner_Derivative(source, vb, side)
    up = _barycentric(geometry, vbp)
    _replace_hits(geometry, up, vbp)
    return u, up

def Compensated_Cauchy_Form(source, target_c, side, derivative=False):
    """
    Dense (M, N) evaluation matrices for the compensated barycentric scheme

    Returns:
        if not derivative: MAT,         with v = MAT.dot(vb)
        if derivative:     (MAT, DMAT), with v' = DMAT.dot(vb)
    Costs O(N^2 M) when derivative is requested
    """
    geometry = Close_Geometry(source, target_c, side)
    MAT = geometry.comp/geometry.J0[:,None]
    ii, jj = geometry.hit_targets, geometry.hit_nodes
    MAT[ii] = 0.0
    MAT[ii, jj] = 1.0
    if not derivative:
        return MAT
    SW = Schneider_Werner_Form(source, side)
    DMAT = MAT.dot(SW)
    DMAT[ii] = SW[jj]
    return MAT, DMAT
