from .arith import BIG, NATIVE, Arithmetic, inverse_mod, inverse_mod_big, pow_mod, select_arithmetic
from .crt import crt
from .dlog import DLogSolver, Subproblem, baby_step_giant_step, discrete_log
from .factor import FactorizedOrder, factorize
