import numpy as np
import pycloseeval as pce
from pycloseeval.misc.curve_descriptions import wobbly_circle
from pycloseeval.self_test import self_test_targets

"""
Test the batch (matrix) version of the near-singular scheme against
column-by-column evaluation, and the dense evaluation matrices it forms
"""

N = 200
boundary = pce.Global_Smooth_Boundary(c=wobbly_circle(N), inside_point=0.0)
sc = boundary.c

dist_i, zi = self_test_targets(boundary, 'i')
dist_e, ze = self_test_targets(boundary, 'e')

# functions holomorphic inside / holomorphic outside and decaying
VBI = np.column_stack([1.0/(sc-(1.1+1.0j)), sc**2, np.exp(sc)])
VBE = np.column_stack([1.0/(sc-(0.1+0.5j)), 1.0/(sc+0.2)**2, 1.0/sc])

opts = pce.Near_Singular_Scheme(delta=1e-2)

def _check_columns(side, z, VB, o):
    u, up = pce.Evaluate_Value_And_Derivative(boundary, z, side, VB, o)
    assert u.shape == (z.shape[0], VB.shape[1])
    assert up.shape == (z.shape[0], VB.shape[1])
    for b in range(VB.shape[1]):
        u1, up1 = pce.Evaluate_Value_And_Derivative(boundary, z, side, VB[:,b], o)
        assert np.allclose(u[:,b], u1, rtol=1e-12, atol=1e-13)
        assert np.allclose(up[:,b], up1, rtol=1e-10, atol=1e-11)
        u2 = pce.Evaluate_Value(boundary, z, side, VB[:,b], o)
        assert np.allclose(pce.Evaluate_Value(boundary, z, side, VB, o)[:,b],
                                                u2, rtol=1e-12, atol=1e-13)

def test_batch_interior():
    _check_columns('i', zi, VBI, opts)

def test_batch_exterior():
    _check_columns('e', ze, VBE, opts)

def test_batch_backends():
    for side, z, VB in (('i', zi, VBI), ('e', ze, VBE)):
        o1 = pce.Near_Singular_Scheme(delta=0.1, backend='numpy')
        o2 = pce.Near_Singular_Scheme(delta=0.1, backend='numba')
        u1, up1 = pce.Evaluate_Value_And_Derivative(boundary, z, side, VB, o1)
        u2, up2 = pce.Evaluate_Value_And_Derivative(boundary, z, side, VB, o2)
        assert np.array_equal(u1, u2)
        assert np.allclose(up1, up2, rtol=1e-12, atol=1e-13)

def test_batch_coincidence():
    targets = np.concatenate([zi[:3], sc[[5, 60]]])
    u, up = pce.Evaluate_Value_And_Derivative(boundary, targets, 'i', VBI, opts)
    assert np.array_equal(u[3], VBI[5])
    assert np.array_equal(u[4], VBI[60])

def test_matrix_mode():
    # moderate distances (and one node hit); the dense derivative matrix has
    # entries of size ~1/distance, so its action loses digits closer in
    for side, z, VB in (('i', zi, VBI), ('e', ze, VBE)):
        targets = np.concatenate([z[:3], sc[[11]]])
        MAT, DMAT = pce.Evaluate_Value_And_Derivative(boundary, targets, side,
                                                            options=opts)
        assert MAT.shape == (4, N)
        assert DMAT.shape == (4, N)
        u, up = pce.Evaluate_Value_And_Derivative(boundary, targets, side,
                                                    VB[:,0], opts)
        assert np.allclose(MAT.dot(VB[:,0]), u, rtol=1e-11, atol=1e-12)
        assert np.allclose(DMAT.dot(VB[:,0]), up, rtol=1e-8, atol=1e-9)
        MAT2 = pce.Evaluate_Value(boundary, targets, side, options=opts)
        assert np.allclose(MAT, MAT2, rtol=1e-14, atol=0.0)

def test_matrix_mode_matches_standard():
    # for interior targets the two schemes share the value formula
    targets = zi[:5]
    MAT1 = pce.Evaluate_Value(boundary, targets, 'i')
    MAT2 = pce.Evaluate_Value(boundary, targets, 'i', options=opts)
    assert np.allclose(MAT1, MAT2, rtol=1e-13, atol=1e-15)
