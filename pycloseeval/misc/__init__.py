from . import basic_functions
from . import curve_descriptions
