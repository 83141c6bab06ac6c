import numpy as np
import numexpr as ne
import numba

################################################################################
# General Purpose Source --> Target Kernel Apply Functions

@numba.njit(parallel=True)
def _cauchy(s, t, dipstr, pot):
    """
    Numba-jitted Cauchy Kernel
    Inputs:
        s,      intent(in),  complex(ns), coordinates of source
        t,      intent(in),  complex(nt), coordinates of target
        dipstr, intent(in),  complex(ns), dipole strength at source locations
        pot,    intent(out), complex(nt), potential at target locations
    ns = number of source points; nt = number of target points
    all inputs are required

    This function should generally not be called directly
    Instead call through the "Cauchy_Kernel_Apply_numba" interface
    """
    for i in numba.prange(t.shape[0]):
        for j in range(s.shape[0]):
            pot[i] += dipstr[j]/(s[j]-t[i])

def Cauchy_Kernel_Apply_numba(source, target, dipstr, weights=None):
    """
    Interface to numba-jitted Cauchy Kernel
    Inputs:
        source,   required, complex(ns), coordinates of source
        target,   required, complex(nt), coordinates of target
        dipstr,   required, complex(ns), dipole strength at source locations
        weights,  optional, complex(ns), quadrature weights
    Outputs:
        complex(nt), potential at target coordinates
    ns = number of source points; nt = number of target points
    """
    weights = 1.0 if weights is None else weights
    weighted_weights = -0.5j*weights/np.pi
    pot = np.zeros(target.shape[0], dtype=complex)
    ds = np.ascontiguousarray(dipstr*weighted_weights, dtype=complex)
    _cauchy(np.ascontiguousarray(source), np.ascontiguousarray(target), ds, pot)
    return pot

def Cauchy_Kernel_Apply_numexpr(source, target, dipstr, weights=None):
    """
    Interface to Cauchy Kernel, by formation of the dense matrix
    Same inputs/outputs as Cauchy_Kernel_Apply_numba
    """
    return Cauchy_Kernel_Form(source, target, weights).dot(dipstr)

Cauchy_Kernel_Applys = {}
Cauchy_Kernel_Applys['numba']   = Cauchy_Kernel_Apply_numba
Cauchy_Kernel_Applys['numexpr'] = Cauchy_Kernel_Apply_numexpr

def Cauchy_Kernel_Apply(source, target, dipstr, weights=None, backend='numba'):
    """
    Interface to Cauchy Kernel
    Computes the naive quadrature of the Cauchy integral:
        u_i = 1/(2i*pi) * sum_j w_j*p_j/(z_j-t_i)
    Inputs:
        source,   required, complex(ns), coordinates of source (z_j)
        target,   required, complex(nt), coordinates of target (t_i)
        dipstr,   required, complex(ns), dipole strength at source locations
        weights,  optional, complex(ns), quadrature weights
        backend,  optional, str,         backend ('numba' or 'numexpr')
    Outputs:
        complex(nt), potential at target coordinates
    ns = number of source points; nt = number of target points
    """
    return Cauchy_Kernel_Applys[backend](source, target, dipstr, weights)

################################################################################
# General Purpose Low Level Source --> Target Kernel Formation

def Cauchy_Kernel_Form(source, target, weights=None):
    """
    Cauchy Kernel Formation
    Computes the matrix:
        1/(2i*pi) * w_j/(z_j-t_i)

    Inputs:
        source,   required, complex(ns),   source coordinates (z_j)
        target,   required, complex(nt),   target coordinates (t_i)
        weights,  optional, numeric(ns),   quadrature weights (w_j)

    This function assumes that source and target have no coincident points
    """
    scale = -0.5j/np.pi
    D = source - target[:,None]
    if weights is not None:
        scale = scale*weights
    return ne.evaluate('scale/D')
