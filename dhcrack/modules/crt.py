import logging
import math

from .arith import inverse_mod_big

logger = logging.getLogger(__name__)


def crt(residues, moduli, inverse=inverse_mod_big):
    """
    Chinese Remainder Theorem for pairwise coprime moduli.
    Returns x mod prod(moduli), or None if some partial product has no inverse.
    """
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli must have the same length")

    prod = math.prod(moduli)
    total = 0
    for r_i, m_i in zip(residues, moduli):
        p_i = prod // m_i
        inv = inverse(p_i, m_i)
        if inv is None:
            logger.debug("[-] No inverse of %d modulo %d", p_i, m_i)
            return None
        total += r_i * p_i * inv

    return total % prod
