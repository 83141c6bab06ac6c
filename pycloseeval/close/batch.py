"""
Near-singular corrected close evaluation for many boundary value vectors

Identical in action to Near_Singular_Apply applied to each column of an
(N, n) matrix of boundary values, but the geometric matrices are formed once
and the value differences are held in one explicit (target, node, batch)
tensor. Called with the identity matrix, this fills the dense (M, N)
evaluation matrices (each column is not the trace of a holomorphic function,
but by linearity the matrices act correctly on any vector that is).

Memory is O(NMn); time is O(NMn) plus O(Nn) per close pair.
"""

import numpy as np

from .geometry import Close_Geometry
from .corrections import correct_close_pairs
from .schneider_werner import Schneider_Werner_Node_Derivative

def Near_Singular_Batch_Apply(source, target_c, side, vb, pole, delta,
                                            derivative=False, backend=None):
    """
    Near-singular corrected evaluation for a matrix of boundary values

    Parameters:
        as for Near_Singular_Apply, except:
        vb,  required, complex(N, n), boundary values, one function per column
    Returns:
        v, complex(M, n); or (v, vp) if derivative, vp complex(M, n)
    """
    geometry = Close_Geometry(source, target_c, side, pole)
    scale = geometry.prefac/geometry.J0
    u = scale[:,None]*geometry.comp.dot(vb)
    if derivative:
        # dv[i,j,b] = vb[j,b] - u[i,b]
        dv = vb[None,:,:] - u[:,None,:]
        ii, jj = geometry.close_pairs(delta)
        correct_close_pairs(geometry, vb, dv, ii, jj, backend)
        K = geometry.comp*geometry.invd
        up = scale[:,None]*np.einsum('ijb,ij->ib', dv, K)
    for i, j in zip(geometry.hit_targets, geometry.hit_nodes):
        u[i] = vb[j]
        if derivative:
            up[i] = Schneider_Werner_Node_Derivative(source, vb, j, side)
    return (u, up) if derivative else u

def Near_Singular_Form(source, target_c, side, pole, delta, derivative=False,
                                                                backend=None):
    """
    Dense (M, N) evaluation matrices for the near-singular scheme

    Returns:
        if not derivative: MAT,         with v = MAT.dot(vb)
        if derivative:     (MAT, DMAT), with v' = DMAT.dot(vb)
    """
    identity = np.eye(source.N, dtype=complex)
    return Near_Singular_Batch_Apply(source, target_c, side, identity, pole,
                                        delta, derivative, backend)
