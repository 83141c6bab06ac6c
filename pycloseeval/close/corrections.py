"""
Cancellation-free value differences for close node/target pairs

The derivative of the barycentric interpolant needs dv_ij = v_j - v(t_i),
which loses all its digits when t_i is close to x_j, since then v(t_i) ~ v_j.
For such pairs dv_ij is recomputed as a single barycentric sum in which the
cancellation happens inside each term:
    interior: dv_ij = sum_k comp_ik*(v_j - v_k) / sum_k pcomp_ik
    exterior: p     = sum_k comp_ik*(v_j/(x_k-a) - v_k/(x_j-a)) / sum_k pcomp_ik
              dv_ij = prefac_i*((x_j-a)*p + (t_i-x_j)*v_j)
Each pair costs O(N) and is independent of every other, so the pair loop is
run in parallel by the numba backend.

All routines work on a batch of boundary values vb with shape (N, n) and
write into dv with shape (M, N, n), i.e. (target, node, batch)
"""

import numpy as np
import numba

from ..backend_defaults import get_correction_backend

@numba.njit(parallel=True)
def _interior_corrections_numba(comp, J0, vb, ii, jj, dv):
    N = comp.shape[1]
    n = vb.shape[1]
    for l in numba.prange(ii.shape[0]):
        i = ii[l]
        j = jj[l]
        for b in range(n):
            acc = 0.0j
            for k in range(N):
                acc += comp[i,k]*(vb[j,b] - vb[k,b])
            dv[i,j,b] = acc/J0[i]

@numba.njit(parallel=True)
def _exterior_corrections_numba(comp, J0, prefac, ipd, sc, tc, a, vb, ii, jj, dv):
    N = comp.shape[1]
    n = vb.shape[1]
    for l in numba.prange(ii.shape[0]):
        i = ii[l]
        j = jj[l]
        for b in range(n):
            acc = 0.0j
            for k in range(N):
                acc += comp[i,k]*(vb[j,b]*ipd[k] - vb[k,b]*ipd[j])
            p = acc/J0[i]
            dv[i,j,b] = prefac[i]*((sc[j]-a)*p + (tc[i]-sc[j])*vb[j,b])

def _interior_corrections_numpy(comp, J0, vb, ii, jj, dv):
    for i, j in zip(ii, jj):
        dv[i,j] = comp[i].dot(vb[j] - vb)/J0[i]

def _exterior_corrections_numpy(comp, J0, prefac, ipd, sc, tc, a, vb, ii, jj, dv):
    for i, j in zip(ii, jj):
        p = comp[i].dot(vb[j]*ipd[:,None] - vb*ipd[j])/J0[i]
        dv[i,j] = prefac[i]*((sc[j]-a)*p + (tc[i]-sc[j])*vb[j])

_corrections = {
    'numpy' : (_interior_corrections_numpy, _exterior_corrections_numpy),
    'numba' : (_interior_corrections_numba, _exterior_corrections_numba),
}

def correct_close_pairs(geometry, vb, dv, ii, jj, backend=None):
    """
    Overwrite dv[i,j,:] for the pairs (ii[l], jj[l]) by their
    cancellation-free forms

    Parameters:
        geometry, required, Close_Geometry (with a pole if exterior)
        vb,       required, complex(N, n),    boundary values
        dv,       required, complex(M, N, n), value differences, intent(inout)
        ii, jj,   required, int(npairs),      target and node indices
        backend,  optional, str,              'numpy' or 'numba'
    """
    if ii.shape[0] == 0:
        return
    backend = get_correction_backend(ii.shape[0], geometry.N, vb.shape[1],
                                                                    backend)
    interior, exterior = _corrections[backend]
    ii = np.ascontiguousarray(ii, dtype=np.int64)
    jj = np.ascontiguousarray(jj, dtype=np.int64)
    if geometry.pole is None:
        interior(geometry.comp, geometry.J0, vb, ii, jj, dv)
    else:
        exterior(geometry.comp, geometry.J0, geometry.prefac,
            geometry.inverse_pole_distance, geometry.source_c,
            geometry.target_c, geometry.pole, vb, ii, jj, dv)
