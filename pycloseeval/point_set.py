import numpy as np

from .exceptions import Invalid_Argument_Error

class PointSet(object):
    """
    This class implements a "Point Set", used for the targets of
    close evaluation

    Instantiation: see documentation to self.__init__()
    Methods:
        reshape:
            reshapes a result back to the shape the points were given in
    """
    def __init__(self, x=None, y=None, c=None):
        """
        Initialize a Point Set.

        x (optional): real vector of x-coordinates
        y (optional): real vector of y-coordinates
        c (optional): complex vector with c.real giving x-coordinates
            and c.imag giving y-coordinates

        The user must provide at least one of the following sets of inputs:
            (1) x and y
                (x and y positions, as real vectors)
            (2) c
                (x and y positions as a complex vector, x=c.real, y=cimag)
        If both are provided the real vectors will be used
        """
        if x is not None and y is not None:
            x = np.asarray(x, dtype=float)
            y = np.asarray(y, dtype=float)
            if x.shape != y.shape:
                raise Invalid_Argument_Error('x and y must have the same shape.')
            self.shape = x.shape
            self.x = x.ravel()
            self.y = y.ravel()
            self.c = self.x + 1j*self.y
        elif c is not None:
            c = np.asarray(c, dtype=complex)
            self.shape = c.shape
            self.c = c.ravel()
            self.x = self.c.real
            self.y = self.c.imag
        else:
            raise Invalid_Argument_Error('Not enough parameters provided to '
                                                        'define Point Set.')
        self.N = self.x.shape[0]
    # end __init__ function definition

    def reshape(self, f):
        """
        reshape a result to the original shape of the Point Set
        (trailing batch dimensions of f are kept)
        """
        return f.reshape(self.shape + f.shape[1:])
    # end reshape function definition

def as_point_set(target):
    """
    Return target as a PointSet; complex arrays and scalars are wrapped
    """
    if isinstance(target, PointSet):
        return target
    return PointSet(c=np.atleast_1d(target))
