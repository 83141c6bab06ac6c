import numpy as np
import pycloseeval as pce
from pycloseeval.misc.curve_descriptions import wobbly_circle
from pycloseeval.kernels.low_level.cauchy import Cauchy_Kernel_Apply, Cauchy_Kernel_Form
from pycloseeval.kernels.high_level.cauchy import Cauchy_Layer_Apply, Cauchy_Layer_Form
from pycloseeval.backend_defaults import get_backend

"""
Test the naive Cauchy Kernel Functions against each other
"""

def get_random(sh, dtype):
    r = np.random.rand(*sh).astype(dtype)
    if dtype is complex:
        r += 1j*np.random.rand(*sh)
    return r

ns = 100
nt = 200

source = get_random([ns,], complex)
target = get_random([nt,], complex) + 2.0
dipstr = get_random([ns,], complex)
weights = get_random([ns,], complex)

# force usage of numba
pot1 = Cauchy_Kernel_Apply(source, target, dipstr, weights, backend='numba')
# form the matrix with numexpr
pot2 = Cauchy_Kernel_Apply(source, target, dipstr, weights, backend='numexpr')
MAT = Cauchy_Kernel_Form(source, target, weights)
pot3 = MAT.dot(dipstr)
# direct
pot4 = np.array([np.sum(weights*dipstr/(source-t)) for t in target])/(2j*np.pi)

def test1():
    assert np.allclose(pot1, pot2, atol=0.0, rtol=1e-12)
    assert np.allclose(pot1, pot3, atol=0.0, rtol=1e-12)
    assert np.allclose(pot1, pot4, atol=0.0, rtol=1e-12)

def test_empty_target():
    empty = np.array([], dtype=complex)
    assert Cauchy_Kernel_Form(source, empty, weights).shape == (0, ns)
    for backend in ('numba', 'numexpr'):
        assert Cauchy_Kernel_Apply(source, empty, dipstr, weights, backend=backend).shape == (0,)

N = 200
boundary = pce.Global_Smooth_Boundary(c=wobbly_circle(N))
far_i = 0.3*np.exp(2j*np.pi*np.arange(10)/10)
far_e = 3.0*np.exp(2j*np.pi*np.arange(10)/10)

def test_layer_far():
    # naive quadrature is fine far from the curve
    vi = lambda z: np.exp(z)
    ve = lambda z: 1.0/(z-0.2)
    ui = Cauchy_Layer_Apply(boundary, far_i, vi(boundary.c), side='i')
    ue = Cauchy_Layer_Apply(boundary, far_e, ve(boundary.c), side='e')
    assert np.allclose(ui, vi(far_i), atol=1e-12, rtol=0.0)
    assert np.allclose(ue, ve(far_e), atol=1e-12, rtol=0.0)
    MAT = Cauchy_Layer_Form(boundary, far_e, side='e')
    assert np.allclose(MAT.dot(ve(boundary.c)), ue, atol=1e-14, rtol=0.0)

def test_get_backend():
    assert get_backend(10, 10) == 'numba'
    assert get_backend(10, 10, 'numexpr') == 'numexpr'
    assert get_backend(10**5, 10**5) == 'numexpr'

def test_configure_backend():
    from pycloseeval.backend_defaults import configure_backend_options, \
                        backend_parameters, get_correction_backend
    old = backend_parameters['numba_max']
    configure_backend_options(numba_max=1)
    try:
        assert get_backend(10, 10) == 'numexpr'
    finally:
        configure_backend_options(numba_max=old)
    assert get_correction_backend(1, 10) == 'numpy'
    assert get_correction_backend(1000, 1000) == 'numba'
    assert get_correction_backend(1, 10, backend='numba') == 'numba'
