import numpy as np
import pycloseeval as pce
from pycloseeval.self_test import run_self_test, main

"""
Run the diagnostic self-test and check its error tables
"""

standard = run_self_test(verbose=False)
near_singular = run_self_test(options=pce.Near_Singular_Scheme(), verbose=False)

def _check(results):
    for side, result in results.items():
        assert result['distance'].shape == (10,)
        assert result['distance'][-1] == 0.0
        assert result['value_error'].max() < 1e-14
        tol = 2e-13 if side is pce.Side.EXTERIOR else 5e-14
        assert result['derivative_error'].max() < tol
        # naive quadrature blows up approaching the curve
        assert result['naive_error'][5] > 1e3
        assert np.isinf(result['naive_error'][-1])

def test_standard():
    _check(standard)

def test_near_singular():
    _check(near_singular)

def test_exterior_derivative_gain():
    e = pce.Side.EXTERIOR
    assert near_singular[e]['derivative_error'].max() < \
                                standard[e]['derivative_error'].max()

def test_main(capsys):
    main(['-N', '100', '--near-singular'])
    out = capsys.readouterr().out
    assert 'side i' in out
    assert 'side e' in out
