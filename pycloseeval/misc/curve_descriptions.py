"""
Smooth closed test curves, as complex node vectors

Nodes are equispaced in the 2*pi periodic parameter t and traversed
counterclockwise, as Global_Smooth_Boundary expects
"""

import numpy as np

def _parameter(N):
    return np.linspace(0.0, 2.0*np.pi, N, endpoint=False)

def wobbly_circle(N, a=0.3, w=5, r=1.0, center=0.0):
    """
    Curve with polar radius r*(1 + a*cos(w*t)) about center

    Parameters:
        N,      required, int,     number of nodes
        a,      optional, float,   wobble amplitude, 0 <= a < 1
        w,      optional, int,     wobble frequency (number of lobes)
        r,      optional, float,   mean radius
        center, optional, complex, center (always inside the curve)
    Enclosed area is pi*r^2*(1 + a^2/2)
    """
    t = _parameter(N)
    return center + r*(1.0 + a*np.cos(w*t))*np.exp(1j*t)

def ellipse(N, a=1.0, b=0.5, center=0.0):
    """
    Axis aligned ellipse with semi-axes a (along x) and b (along y)
    """
    t = _parameter(N)
    return center + a*np.cos(t) + 1j*b*np.sin(t)
