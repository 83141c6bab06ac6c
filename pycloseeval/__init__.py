from . import exceptions
from . import backend_defaults
from . import point_set
from . import misc
from . import boundaries
from . import close
from . import kernels

from .exceptions import Close_Evaluation_Error, Configuration_Error, Invalid_Argument_Error
from .point_set import PointSet
from .boundaries import Boundary, Global_Smooth_Boundary
from .close import Side, Standard_Scheme, Near_Singular_Scheme
from .close import Close_Evaluator, Evaluate_Value, Evaluate_Value_And_Derivative
