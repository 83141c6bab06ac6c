from . import boundary
from . import global_smooth_boundary

from .boundary import Boundary
from .global_smooth_boundary import Global_Smooth_Boundary
