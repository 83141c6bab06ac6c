from . import low_level
from . import high_level
