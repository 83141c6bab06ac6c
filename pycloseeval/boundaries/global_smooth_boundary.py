import numpy as np
import scipy as sp
import scipy.signal

from .boundary import Boundary
from ..point_set import PointSet
from ..exceptions import Invalid_Argument_Error

class Global_Smooth_Boundary(Boundary):
    """
    This class implements a "global smooth boundary" for use in
    close evaluation: the nodes are taken to be equispaced in a 2*pi
    periodic parametrization, and the periodic trapezoid rule is used

    Instantiation: see documentation to self.__init__()
    """
    def __init__(self, x=None, y=None, c=None, inside_point=None):
        """
        This function initializes the boundary element.

        x (optional): real vector of x-coordinates
        y (optional): real vector of y-coordinates
        c (optional): complex vector with c.real giving x-coordinates
            and c.imag giving y-coordinates
        inside_point (optional): complex point deep inside the curve
        The user must provide at least one of the following sets of inputs:
            (1) x and y
                (x and y positions, as real vectors)
            (2) c
                (x and y positions as a complex vector, x=c.real, y=cimag)
        The curve should be traversed counterclockwise, so that the normals
            computed here point outward

        As of now, its not clear to me that everything will
        work if n is odd. For now, I will throw an error if x/y/c have an
        odd number of elements in them
        """
        nodes = PointSet(x, y, c)
        N = nodes.N
        if N % 2 != 0:
            raise Invalid_Argument_Error('The Global_Smooth_Boundary class '
                                                        'only accepts even N.')
        self.t, self.dt = np.linspace(0, 2*np.pi, N, endpoint=False,
                                                                retstep=True)
        self.k = np.fft.fftfreq(N, self.dt/(2.0*np.pi)) # fourier modes
        self.ik = 1j*self.k
        self.chat = np.fft.fft(nodes.c)
        self.cp = np.fft.ifft(self.chat*self.ik)
        self.cpp = np.fft.ifft(self.chat*self.ik**2)
        self.speed = np.abs(self.cp)
        normal_c = -1.0j*self.cp/self.speed
        super(Global_Smooth_Boundary, self).__init__(c=nodes.c,
            weights=self.dt*self.speed, normals=normal_c,
            inside_point=inside_point)
        self.curvature = -(np.conj(self.cpp)*self.normal_c).real/self.speed**2
        self.area = self.dt*np.sum(self.x*self.cp.imag)
        self.perimeter = self.dt*np.sum(self.speed)
    # end __init__ function definition

    def generate_resampled_boundary(self, new_N):
        """
        Fourier resample the curve to new_N nodes (the inside point is kept)
        """
        sfc = sp.signal.resample(self.c, new_N)
        return Global_Smooth_Boundary(c=sfc, inside_point=self.inside_point)
    # end generate_resampled_boundary definition

    def tolerance_to_distance(self, tol):
        """
        Given error tolerance, finds distance where naive quadrature fails
        to reach that tolerance (so that close evaluation is needed)
        """
        return -np.log(tol)*self.max_h/4.5
