"""
Self-test for the close evaluators

Builds the wobbly curve r(t) = 1 + 0.3*cos(5t), and evaluates v(z) = 1/(z-p)
and v'(z) = -1/(z-p)^2 along a ray of targets heading into the node at
t = pi/2, at distances from 1 down to 1e-18, the last target hitting the node
exactly. The pole p is outside the curve for interior evaluation and inside
it for exterior evaluation. The naive Cauchy quadrature is shown for
comparison; it blows up as the targets approach the curve.

Run with:
    python -m pycloseeval.self_test [--near-singular] [--plot]
"""

import argparse
import numpy as np

from .misc.curve_descriptions import wobbly_circle
from .boundaries.global_smooth_boundary import Global_Smooth_Boundary
from .close.options import Side, parse_side, Near_Singular_Scheme
from .close.evaluator import Evaluate_Value_And_Derivative
from .kernels.high_level.cauchy import Cauchy_Layer_Apply

poles = {
    Side.INTERIOR : 1.1+1.0j,
    Side.EXTERIOR : 0.1+0.5j,
}

def self_test_targets(source, side, n=10):
    """
    Returns (distances, targets): n targets along a ray into node N/4
    """
    z0 = source.c[source.N//4]
    ds = np.logspace(0, -18, n)*(0.1-1.0j)
    if parse_side(side) is Side.EXTERIOR:
        ds = -ds
    z = z0 + ds
    z[-1] = z0
    dist = np.abs(ds.imag)
    dist[-1] = 0.0
    return dist, z

def run_self_test(N=200, options=None, sides=('i', 'e'), verbose=True,
                                                                plot=False):
    """
    Runs the self-test

    Parameters:
        N,       optional, int,  number of nodes (multiple of 4)
        options, optional, Standard_Scheme or Near_Singular_Scheme
        sides,   optional, tuple of sides to test
        verbose, optional, bool, print the error tables
        plot,    optional, bool, plot the errors against distance
    Returns:
        dict keyed by Side, of dicts with keys:
            'distance', 'value_error', 'derivative_error', 'naive_error'
    """
    source = Global_Smooth_Boundary(c=wobbly_circle(N), inside_point=0.0)
    results = {}
    for side in sides:
        side = parse_side(side)
        p = poles[side]
        v = lambda z: 1.0/(z-p)
        vp = lambda z: -1.0/(z-p)**2
        dist, z = self_test_targets(source, side)
        vb = v(source.c)
        vc, vcp = Evaluate_Value_And_Derivative(source, z, side, vb, options)
        # the naive quadrature is singular at the node itself
        naive = Cauchy_Layer_Apply(source, z[:-1], vb, side=side)
        results[side] = {
            'distance'         : dist,
            'value_error'      : np.abs(vc - v(z)),
            'derivative_error' : np.abs(vcp - vp(z)),
            'naive_error'      : np.append(np.abs(naive - v(z[:-1])), np.inf),
        }
        if verbose:
            _print_table(side, results[side])
    if plot:
        _plot(results)
    return results

def _print_table(side, result):
    print('side ' + side.value + ':  dist        v err       v\' err     naive v err')
    for row in zip(*[result[key] for key in ('distance', 'value_error',
                                    'derivative_error', 'naive_error')]):
        print('  {:0.1e}   {:0.2e}   {:0.2e}   {:0.2e}'.format(*row))

def _plot(results):
    import matplotlib.pyplot as plt
    fig, axs = plt.subplots(1, len(results), figsize=(6*len(results), 4))
    axs = np.atleast_1d(axs)
    for ax, (side, result) in zip(axs, results.items()):
        d = result['distance'][:-1]
        ax.loglog(d, result['value_error'][:-1], 'o-', label='v')
        ax.loglog(d, result['derivative_error'][:-1], 's-', label='v\'')
        ax.loglog(d, result['naive_error'][:-1], 'x--', label='naive v')
        ax.set_xlabel('distance from curve')
        ax.set_ylabel('error')
        ax.set_title('interior' if side is Side.INTERIOR else 'exterior')
        ax.legend()
    plt.show()

def main(argv=None):
    parser = argparse.ArgumentParser(description='Close evaluation self-test')
    parser.add_argument('-N', type=int, default=200, help='number of nodes')
    parser.add_argument('--near-singular', action='store_true',
                                    help='use the near-singular scheme')
    parser.add_argument('--delta', type=float, default=None,
                                    help='close pair distance for --near-singular')
    parser.add_argument('--plot', action='store_true', help='plot the errors')
    args = parser.parse_args(argv)
    options = Near_Singular_Scheme(delta=args.delta) if args.near_singular \
                                                                    else None
    run_self_test(args.N, options, plot=args.plot)

if __name__ == '__main__':
    main()
