import numpy as np
import numexpr as ne

from ..misc.basic_functions import rowsum
from .options import Side

class Close_Geometry(object):
    """
    Pairwise node/target matrices shared by all close evaluators

    All matrices are stored (target, node), i.e. with shape (M, N), so that
    sums over the nodes are row sums and forms act by MAT.dot(vb)

    Attributes:
        displacement, complex(M, N), x_j - t_i (1.0 at coincidences)
        invd,         complex(M, N), 1/(x_j - t_i) (0.0 at coincidences)
        comp,         complex(M, N), cw_j/(x_j - t_i) (0.0 at coincidences)
        pcomp,        complex(M, N), comp/(x_j - a) exterior with pole, else comp
        J0,           complex(M),    row sums of pcomp (shifted by -2i*pi for
                                     the exterior without pole)
        prefac,       complex(M),    1/(t_i - a) exterior with pole, else 1
        hit_targets,  int(nhit),     indices i of targets lying on a node
        hit_nodes,    int(nhit),     indices j of the nodes they lie on

    Coincidences are found by exact comparison before any division, so that
    no infinities or nans are ever formed
    """
    def __init__(self, source, target_c, side, pole=None):
        """
        source,   required, Boundary
        target_c, required, complex(M), target points
        side,     required, Side
        pole,     optional, complex, inside point used to regularize the
            exterior denominator (ignored for interior targets)
        """
        self.side = side
        self.pole = pole if side is Side.EXTERIOR else None
        sc = source.c
        T = target_c[:,None]
        cw = source.complex_weights
        self.N = source.N
        self.M = target_c.shape[0]
        self.source_c = sc
        self.target_c = target_c
        self.complex_weights = cw
        # numexpr does not broadcast against an empty target axis
        D = sc - T
        hit = D == 0.0
        self.hit_targets, self.hit_nodes = np.nonzero(hit)
        D[hit] = 1.0
        self.displacement = D
        self.invd = ne.evaluate('1.0/D')
        self.invd[hit] = 0.0
        self.comp = cw*self.invd
        if self.pole is not None:
            a = self.pole
            self.inverse_pole_distance = 1.0/(sc - a)
            ipd = self.inverse_pole_distance
            self.pcomp = self.comp*ipd
            self.prefac = 1.0/(target_c - a)
        else:
            self.inverse_pole_distance = None
            self.pcomp = self.comp
            self.prefac = np.ones(self.M, dtype=complex)
        self.J0 = rowsum(self.pcomp)
        if side is Side.EXTERIOR and self.pole is None:
            self.J0 -= 2.0j*np.pi

    def close_pairs(self, delta):
        """
        Returns (targets, nodes) index arrays of all non-coincident pairs
        with |x_j - t_i| < delta; delta=0 returns every non-coincident pair
        """
        if delta == 0:
            close = np.ones((self.M, self.N), dtype=bool)
        else:
            close = np.abs(self.displacement) < delta
        close[self.hit_targets, self.hit_nodes] = False
        return np.nonzero(close)
