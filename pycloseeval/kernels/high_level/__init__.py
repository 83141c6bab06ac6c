from . import cauchy
