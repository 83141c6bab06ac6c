"""
Derivative of the barycentric interpolant at its own nodes

For node k, the Schneider-Werner formula (with the complex speed weights in
place of barycentric weights) reads:
    v'_k = -(1/cw_k) * [ sum_{j!=k} cw_j*(v_k - v_j)/(x_k - x_j) + c*v_k ]
where c = 0 for interior targets and c = 2i*pi for exterior targets; the
latter accounts for the -2i*pi shift of the exterior barycentric denominator.
The exterior formula suffers from about 2.5 digits of cancellation between
the sum and the c*v_k term.
"""

import numpy as np
import numexpr as ne

from ..misc.basic_functions import rowsum
from .options import Side

def _node_cauchy_matrix(source):
    """
    S[k,j] = cw_j/(x_k - x_j) for j != k, 0 on the diagonal
    """
    sc = source.c
    scT = sc[:,None]
    cw = source.complex_weights
    D = ne.evaluate('scT - sc')
    np.fill_diagonal(D, 1.0)
    S = ne.evaluate('cw/D')
    np.fill_diagonal(S, 0.0)
    return S

def _side_shift(side):
    return 2.0j*np.pi if side is Side.EXTERIOR else 0.0

def Schneider_Werner_Derivative(source, vb, side):
    """
    Derivative at every node of the barycentric interpolant of vb

    Parameters:
        source, required, Boundary
        vb,     required, complex(N) or complex(N, n), boundary values
        side,   required, Side
    Returns:
        complex array with the shape of vb
    """
    S = _node_cauchy_matrix(source)
    cw = source.complex_weights
    shift = _side_shift(side)
    def _derivative(v):
        # the differences v_k - v_j are formed explicitly, never as
        # v_k*sum_j(S_kj) - sum_j(S_kj*v_j)
        vk = v[:,None]
        acc = rowsum(ne.evaluate('S*(vk - v)', local_dict={'S': S, 'vk': vk,
                                                        'v': v})) + shift*v
        return -acc/cw
    if vb.ndim == 1:
        return _derivative(vb)
    vbp = np.empty_like(vb)
    for b in range(vb.shape[1]):
        vbp[:,b] = _derivative(np.ascontiguousarray(vb[:,b]))
    return vbp

def Schneider_Werner_Node_Derivative(source, vb, k, side):
    """
    Derivative of the barycentric interpolant of vb at the single node k

    Parameters:
        source, required, Boundary
        vb,     required, complex(N) or complex(N, n), boundary values
        k,      required, int, index of the node
        side,   required, Side
    Returns:
        complex scalar, or complex(n) for matrix vb
    """
    sc = source.c
    cw = source.complex_weights
    notk = np.arange(source.N) != k
    wts = cw[notk]/(sc[k] - sc[notk])
    acc = wts.dot(vb[k] - vb[notk]) + _side_shift(side)*vb[k]
    return -acc/cw[k]

def Schneider_Werner_Form(source, side):
    """
    Matrix DMAT with DMAT.dot(vb) = Schneider_Werner_Derivative(source, vb, side)
    """
    S = _node_cauchy_matrix(source)
    DMAT = S.copy()
    np.fill_diagonal(DMAT, -rowsum(S) - _side_shift(side))
    cwT = source.complex_weights[:,None]
    return ne.evaluate('DMAT/cwT')
