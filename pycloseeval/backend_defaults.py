"""
Configures the default parameters for close evaluation and the values at
which the computational backend shifts between different methods

Note that for matrix formations (the geometric comp/pcomp/invd matrices),
the only backend used is numexpr
For the close-pair corrections of the near-singular scheme, the program
selects between numpy and numba based on the value set in
close_parameters['numba_min_pairs']
"""

import numpy as np

from .exceptions import Invalid_Argument_Error

close_parameters = {}
close_parameters['delta'] = 1e-2
close_parameters['numba_min_pairs'] = 200*200

backend_parameters = {}
backend_parameters['numba_max'] = 10000*10000

def configure_close_options(delta=None, numba_min_pairs=None):
    """
    Sets close evaluation parameters

    Parameters:
        delta: default distance below which a node/target pair has its value
            difference recomputed in cancellation-free form by the
            near-singular scheme
        numba_min_pairs: sets the transition point for the close-pair
            corrections. if the amount of work (number of corrected pairs
            times N times the batch size) is < numba_min_pairs, the
            corrections are done with a numpy loop, otherwise they are done
            with the numba backend
    """
    if delta is not None:
        close_parameters['delta'] = check_delta(delta)
    if numba_min_pairs is not None:
        close_parameters['numba_min_pairs'] = numba_min_pairs

def configure_backend_options(numba_max=None):
    """
    Sets backend parameters for the naive kernel applies

    Parameters:
        numba_max: if the size of the total apply (N*M) < numba_max,
            the computation is done directly using the numba backend,
            otherwise the dense matrix is formed with numexpr and applied
    """
    if numba_max is not None:
        backend_parameters['numba_max'] = numba_max

def check_delta(delta):
    delta = float(delta)
    if not np.isfinite(delta) or delta < 0:
        raise Invalid_Argument_Error('delta must be a finite, non-negative '
                                                'float; got ' + repr(delta))
    return delta

def get_backend(n_source, n_target, backend=None):
    """
    Return which computational backend to use for a naive kernel apply

    If backend is provided, will check if backend is one of the available
        backends, and return the backend if available, otherwise raise an error
    If backend is not provided (or is 'fly'):
        will return 'numexpr' if n_source*n_target > backend_parameters['numba_max']
        otherwise will return 'numba'
    """
    if backend is None or backend == 'fly':
        size = n_source*n_target
        backend = 'numba' if size <= backend_parameters['numba_max'] \
                                                            else 'numexpr'
    elif backend not in ('numba', 'numexpr'):
        raise Invalid_Argument_Error("Requested backend '" + str(backend) + \
                                        "' is not an implemented backend.")
    return backend

def get_correction_backend(n_pairs, n_source, n_batch=1, backend=None):
    """
    Return which backend to use for the close-pair corrections

    If backend is provided, it must be 'numpy' or 'numba'
    If backend is not provided, 'numba' is returned when the total work
        n_pairs*n_source*n_batch reaches close_parameters['numba_min_pairs']
    """
    if backend is None:
        work = n_pairs*n_source*n_batch
        backend = 'numba' if work >= close_parameters['numba_min_pairs'] \
                                                            else 'numpy'
    elif backend not in ('numpy', 'numba'):
        raise Invalid_Argument_Error("Requested correction backend '" + \
                            str(backend) + "' is not an implemented backend.")
    return backend
