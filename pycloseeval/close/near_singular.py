"""
Near-singular corrected close evaluation (single vector of boundary values)

The value is the barycentric form of Ioakimidis et al. for interior targets;
for exterior targets the function 1 in the denominator is replaced by
1/(y-a), with a a point deep inside the curve, and the result is multiplied
back by 1/(t-a):
    v(t) ~ prefac * sum_j comp_j*v_j / sum_j pcomp_j
For the derivative, the barycentric form is differentiated directly:
    v'(t) ~ prefac * sum_j dv_j*comp_j/(x_j-t) / sum_j pcomp_j,
    dv_j = v_j - v(t)
with dv_j recomputed in cancellation-free form (see corrections.py) whenever
|x_j - t| < delta. This gives about one more digit than the compensated
scheme for exterior derivatives, at O(N) extra cost per close pair.

Targets lying exactly on a node get the nodal value and the nodal
Schneider-Werner derivative (side aware) exactly.
"""

import numpy as np
import numexpr as ne

from ..misc.basic_functions import rowsum
from .geometry import Close_Geometry
from .corrections import correct_close_pairs
from .schneider_werner import Schneider_Werner_Node_Derivative

def Near_Singular_Apply(source, target_c, side, vb, pole, delta,
                                            derivative=False, backend=None):
    """
    Near-singular corrected evaluation for a single vector vb

    Parameters:
        source,     required, Boundary
        target_c,   required, complex(M), target points
        side,       required, Side
        vb,         required, complex(N), boundary values
        pole,       required, complex,    inside point (may be None for
                                          interior targets)
        delta,      required, float,      close pair distance
        derivative, optional, bool,       also compute v'
        backend,    optional, str,        backend for close pair corrections
    Returns:
        v, complex(M); or (v, vp) if derivative
    """
    geometry = Close_Geometry(source, target_c, side, pole)
    u = geometry.prefac*geometry.comp.dot(vb)/geometry.J0
    if derivative:
        M, N = geometry.M, geometry.N
        dv = vb - u[:,None]
        ii, jj = geometry.close_pairs(delta)
        correct_close_pairs(geometry, vb.reshape(N, 1), dv.reshape(M, N, 1),
                                                        ii, jj, backend)
        comp = geometry.comp
        invd = geometry.invd
        up = geometry.prefac*rowsum(ne.evaluate('dv*comp*invd'))/geometry.J0
    for i, j in zip(geometry.hit_targets, geometry.hit_nodes):
        u[i] = vb[j]
        if derivative:
            up[i] = Schneider_Werner_Node_Derivative(source, vb, j, side)
    return (u, up) if derivative else u
