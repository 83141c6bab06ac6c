import numpy as np

from ..exceptions import Invalid_Argument_Error

def rowsum(x):
	return x.dot(np.ones(x.shape[1]))

def as_boundary_values(source, vb):
	"""
	Return vb as a complex array with one row per node of source
	vb may be a vector (N,) or a batch of n vectors stored as columns (N, n)
	"""
	vb = np.asarray(vb, dtype=complex)
	if vb.ndim not in (1, 2):
		raise Invalid_Argument_Error('Boundary values must be a vector or a '
										'matrix with one column per function.')
	if vb.shape[0] != source.N:
		raise Invalid_Argument_Error('Boundary has ' + str(source.N) + \
			' nodes but ' + str(vb.shape[0]) + ' boundary values were given.')
	return np.ascontiguousarray(vb)
