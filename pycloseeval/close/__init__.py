from . import options
from . import geometry
from . import schneider_werner
from . import compensated
from . import corrections
from . import near_singular
from . import batch
from . import evaluator

from .options import Side, Standard_Scheme, Near_Singular_Scheme
from .evaluator import Close_Evaluator, Evaluate_Value, Evaluate_Value_And_Derivative
