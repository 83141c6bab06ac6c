import numpy as np
import time
import pycloseeval as pce
from pycloseeval.misc.curve_descriptions import ellipse
from pycloseeval.kernels.high_level.cauchy import Cauchy_Layer_Apply

"""
Demonstrate usage of the close evaluators on an ellipse
Evaluates a function holomorphic outside the curve on a grid of exterior
points hugging the boundary, and compares:
    naive quadrature
    compensated (standard) scheme, apply
    near-singular scheme, apply
    near-singular scheme, preformed matrix
Also timing/consistency checks
"""

NB = 400
boundary = pce.Global_Smooth_Boundary(c=ellipse(NB, a=1.0, b=0.5),
                                                        inside_point=0.0)

# function holomorphic outside the curve, vanishing at infinity
solution_func = lambda z: 1.0/(z-0.1j) + 1.0/(z+0.2)**2
solution_deriv = lambda z: -1.0/(z-0.1j)**2 - 2.0/(z+0.2)**3
vb = solution_func(boundary.c)

# targets: displaced outward along the normals by distances 1e-1 ... 1e-12
ds = np.logspace(-1, -12, 12)
targets = (boundary.c[:,None] + ds*boundary.normal_c[:,None]).ravel()
u_true = solution_func(targets)
up_true = solution_deriv(targets)

print('\n-- Exterior close evaluation, NB = {:d}, {:d} targets --\n'.format(
                                                            NB, targets.shape[0]))

st = time.time()
u_naive = Cauchy_Layer_Apply(boundary, targets, vb, side='e')
time_naive = time.time() - st

st = time.time()
u_std, up_std = pce.Evaluate_Value_And_Derivative(boundary, targets, 'e', vb)
time_std = time.time() - st

opts = pce.Near_Singular_Scheme(delta=1e-2)
st = time.time()
u_ns, up_ns = pce.Evaluate_Value_And_Derivative(boundary, targets, 'e', vb, opts)
time_ns = time.time() - st

# preformed matrix, for a block of targets
block = targets[:24]
st = time.time()
MAT, DMAT = pce.Evaluate_Value_And_Derivative(boundary, block, 'e', options=opts)
time_form = time.time() - st

print('Maximum error, value,      naive:          {:0.1e}'.format(np.abs(u_naive-u_true).max()))
print('Maximum error, value,      standard:       {:0.1e}'.format(np.abs(u_std-u_true).max()))
print('Maximum error, derivative, standard:       {:0.1e}'.format(np.abs(up_std-up_true).max()))
print('Maximum error, value,      near-singular:  {:0.1e}'.format(np.abs(u_ns-u_true).max()))
print('Maximum error, derivative, near-singular:  {:0.1e}'.format(np.abs(up_ns-up_true).max()))
print('Maximum difference, preformed vs. apply:   {:0.1e}'.format(np.abs(MAT.dot(vb)-u_ns[:24]).max()))
print('')
print('Time for naive apply         (ms): {:0.2f}'.format(time_naive*1000))
print('Time for standard apply      (ms): {:0.2f}'.format(time_std*1000))
print('Time for near-singular apply (ms): {:0.2f}'.format(time_ns*1000))
print('Time for near-singular form  (ms): {:0.2f}'.format(time_form*1000))
