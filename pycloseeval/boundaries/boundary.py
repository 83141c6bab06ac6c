import numpy as np
import warnings

from ..point_set import PointSet
from ..exceptions import Invalid_Argument_Error

class Boundary(PointSet):
    """
    Closed curve carrying a smooth global quadrature rule

    This is the data consumed by the close evaluators: node locations,
    speed weights, unit normals, and the complex speed weights derived from
    them. Any quadrature generator can be used to build one; for a periodic
    trapezoid rule computed from the nodes alone, see Global_Smooth_Boundary

    Instantiation: see documentation to self.__init__()
    Methods:
        set_inside_point:
            sets the point used by the pole-regularized exterior scheme
        test_inside_point:
            cheap check that a candidate inside point is actually inside
    """
    def __init__(self, x=None, y=None, c=None, weights=None, normals=None,
                                                        inside_point=None):
        """
        This function initializes the boundary.

        x (optional): real vector of x-coordinates of the nodes
        y (optional): real vector of y-coordinates of the nodes
        c (optional): complex vector with c.real giving x-coordinates
            and c.imag giving y-coordinates
        weights (required): positive speed weights for arc-length integrals
        normals (required): unit outward normals, as complex numbers
        inside_point (optional): complex point deep inside the curve,
            only needed by the near-singular scheme for exterior targets

        The complex weights are cw_j = w_j * tau_j, where tau_j = 1j*n_j is
        the unit tangent. They are computed here once and never changed.
        """
        super(Boundary, self).__init__(x, y, c)
        self.c = np.array(self.c)
        self.x = self.c.real
        self.y = self.c.imag
        if self.N < 1:
            raise Invalid_Argument_Error('A Boundary needs at least one node.')
        if weights is None or normals is None:
            raise Invalid_Argument_Error('A Boundary needs weights and normals.')
        weights = np.array(weights, dtype=float).ravel()
        normals = np.array(normals, dtype=complex).ravel()
        self._check_length(weights, 'weights')
        self._check_length(normals, 'normals')
        normals = normals/np.abs(normals)
        self._set_quadrature(weights, normals, 1j*weights*normals)
        self.inside_point = None
        if inside_point is not None:
            self.set_inside_point(inside_point)
    # end __init__ function definition

    def set_inside_point(self, c):
        """
        Set an inside point, used by the near-singular exterior scheme
        c should be an imaginary float, with c.real=x, c.imag=y
        """
        c = complex(c)
        if not self.test_inside_point(c):
            warnings.warn('Inside point failed basic test, is it actually inside?')
        self.inside_point = c
    # end set_inside_point function definition

    def test_inside_point(self, candidate, eps=1e-10):
        """
        Test whether the provided inside point is acceptable
        returns True if the point is okay, False if its not
        """
        test_value = np.sum(self.complex_weights/(self.c-candidate))
        return np.abs(test_value - 2.0j*np.pi) < eps
    # end test_inside_point function

    def _check_length(self, arr, name):
        if arr.shape[0] != self.N:
            raise Invalid_Argument_Error('Boundary has ' + str(self.N) + \
                ' nodes but ' + str(arr.shape[0]) + ' ' + name + ' were given.')

    def _set_quadrature(self, weights, normal_c, complex_weights):
        self.weights = weights
        self.normal_c = normal_c
        self.normal_x = normal_c.real
        self.normal_y = normal_c.imag
        self.tangent_c = 1j*normal_c
        self.complex_weights = complex_weights
        self.max_h = np.max(self.weights)
        for arr in (self.c, self.weights, self.normal_c, self.complex_weights):
            arr.setflags(write=False)
