import numpy as np

from ..point_set import as_point_set
from ..misc.basic_functions import as_boundary_values
from ..exceptions import Configuration_Error
from .options import Side, parse_side, parse_scheme
from .compensated import Compensated_Cauchy_Apply, Compensated_Cauchy_Form
from .near_singular import Near_Singular_Apply
from .batch import Near_Singular_Batch_Apply, Near_Singular_Form

class Close_Evaluator(object):
    """
    This class implements a "close evaluator" for functions given by their
    values on the nodes of a Boundary

    For now, this class assumes that all targets lie either in the interior
    of the boundary, or the exterior of the boundary
    The side should be provided by the user

    Instantiation: see documentation to self.__init__()
    Methods:
        value(target, vb=None):
            evaluates v at the targets (the dense matrix if vb is None)
        value_and_derivative(target, vb=None):
            evaluates v and v' at the targets (dense matrices if vb is None)
        form(target, derivative=False):
            the dense (M, N) evaluation matrix (and derivative matrix)
    """
    def __init__(self, source, side, options=None):
        """
        Parameters:
            source,  required, Boundary
            side,    required, Side or str, ('i' or 'e'), interior or exterior
            options, optional, Standard_Scheme or Near_Singular_Scheme
                (None selects the Standard_Scheme)

        Raises Configuration_Error if the Near_Singular_Scheme is requested
            for exterior targets and neither options nor source provide an
            inside point
        """
        self.source = source
        self.side = parse_side(side)
        self.options = parse_scheme(options)
        self.pole = None
        if self.options.near_singular and self.side is Side.EXTERIOR:
            self.pole = self.options.inside_point
            if self.pole is None:
                self.pole = getattr(source, 'inside_point', None)
            if self.pole is None:
                raise Configuration_Error('An inside point is needed to use '
                    'the near-singular scheme for exterior targets; set it on '
                    'the boundary or pass inside_point to Near_Singular_Scheme.')
    # end __init__ function definition

    def __call__(self, target, vb=None, derivative=False):
        if derivative:
            return self.value_and_derivative(target, vb)
        return self.value(target, vb)

    def value(self, target, vb=None):
        if vb is None or np.size(vb) == 0:
            return self.form(target)
        return self._apply(target, vb, False)

    def value_and_derivative(self, target, vb=None):
        if vb is None or np.size(vb) == 0:
            return self.form(target, derivative=True)
        return self._apply(target, vb, True)

    def form(self, target, derivative=False):
        target = as_point_set(target)
        if self.options.near_singular:
            return Near_Singular_Form(self.source, target.c, self.side,
                self.pole, self.options.delta, derivative, self.options.backend)
        return Compensated_Cauchy_Form(self.source, target.c, self.side,
                                                                    derivative)

    def _apply(self, target, vb, derivative):
        target = as_point_set(target)
        vb = as_boundary_values(self.source, vb)
        if not self.options.near_singular:
            return Compensated_Cauchy_Apply(self.source, target.c, self.side,
                                                            vb, derivative)
        func = Near_Singular_Apply if vb.ndim == 1 else Near_Singular_Batch_Apply
        return func(self.source, target.c, self.side, vb, self.pole,
                    self.options.delta, derivative, self.options.backend)

def Evaluate_Value(source, target, side, vb=None, options=None):
    """
    Close evaluation of a function from its values on the boundary nodes

    Parameters:
        source,  required, Boundary
        target,  required, PointSet or complex(M)
        side,    required, Side or str, ('i' or 'e')
        vb,      optional, complex(N) or complex(N, n), boundary values
        options, optional, Standard_Scheme or Near_Singular_Scheme
    Returns:
        complex(M), or complex(M, n) for matrix vb
        if vb is None or empty: the dense (M, N) matrix MAT, v = MAT.dot(vb)
    """
    return Close_Evaluator(source, side, options).value(target, vb)

def Evaluate_Value_And_Derivative(source, target, side, vb=None, options=None):
    """
    Close evaluation of a function and its complex derivative from its values
    on the boundary nodes

    Parameters:
        see Evaluate_Value
    Returns:
        (v, vp), both complex(M), or complex(M, n) for matrix vb
        if vb is None or empty: the dense (M, N) matrices (MAT, DMAT)
    """
    return Close_Evaluator(source, side, options).value_and_derivative(target, vb)
