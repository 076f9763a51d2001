#
# Mach number as a function of the compressible flow quantities
#
# Explicit inversions where they exist, otherwise a bounded iterative solve on
# the physical branch. Values no Mach number on the branch can produce give
# NaN.
#
from collections import namedtuple

import numpy as np

from . import forward as fwd
from . import derivative as der
from .forward import quiet
from .solve import find_root, MA_MAX

# Everything the iterative solve needs to know about one branch of a relation
Relation = namedtuple('Relation', [
    'fun',  # Quantity as a function of (Ma, ga)
    'der',  # Its derivative, None to bisect instead of Newton iteration
    'Ma_lim',  # Search domain
    'Ma_guess',  # Initial guess for Newton iteration
])

# Search domains for each branch
MA_SUB = (0., 1.)
MA_SUP = (1., MA_MAX)

# Relations with a subsonic and a supersonic root, indexed by supersonic flag
_A_ACRIT = (
    Relation(fwd.A_Acrit_from_Ma, None, MA_SUB, None),
    Relation(fwd.A_Acrit_from_Ma, None, MA_SUP, None),
)
_MCPTO_APO = (
    Relation(fwd.mcpTo_APo_from_Ma, None, MA_SUB, None),
    Relation(fwd.mcpTo_APo_from_Ma, None, MA_SUP, None),
)
_F_MCPTO = (
    Relation(fwd.F_mcpTo_from_Ma, None, MA_SUB, None),
    Relation(fwd.F_mcpTo_from_Ma, None, MA_SUP, None),
)

# Monotonic relations, Newton iteration with bisection as a fallback
_MCPTO_AP = Relation(
    fwd.mcpTo_AP_from_Ma, der.derivative_mcpTo_AP_from_Ma, (0., MA_MAX), 0.3)
_POSH_PO = Relation(
    fwd.Posh_Po_from_Ma, der.derivative_Posh_Po_from_Ma, MA_SUP, 1.5)
_NU = Relation(
    fwd.nu_from_Ma, der.derivative_nu_from_Ma, MA_SUP, 2.)


def _invert(rel, Y_in, ga_in):
    Y, ga = np.broadcast_arrays(np.asarray(Y_in, float),
                                np.asarray(ga_in, float))

    def err(Ma):
        return rel.fun(Ma, ga) - Y

    if rel.der is None:
        jac = None
    else:
        def jac(Ma):
            return rel.der(Ma, ga)

    # Tolerances relative to the target, some relations decay to zero
    return find_root(err, rel.Ma_lim, jac=jac, x0=rel.Ma_guess,
                     scale=np.abs(Y))


# Simple ratios

@quiet
def Ma_from_To_T(To_T, ga):
    To_T, ga = np.asarray(To_T, float), np.asarray(ga, float)
    return np.sqrt((To_T - 1.) * 2. / (ga - 1.))


@quiet
def Ma_from_Po_P(Po_P, ga):
    Po_P, ga = np.asarray(Po_P, float), np.asarray(ga, float)
    return np.sqrt((Po_P ** ((ga - 1.) / ga) - 1.) * 2. / (ga - 1.))


@quiet
def Ma_from_rhoo_rho(rhoo_rho, ga):
    rhoo_rho, ga = np.asarray(rhoo_rho, float), np.asarray(ga, float)
    return np.sqrt((rhoo_rho ** (ga - 1.) - 1.) * 2. / (ga - 1.))


# Velocity and mass flow functions

@quiet
def Ma_from_V_cpTo(V_cpTo, ga):
    """NaN at and above the limiting velocity V_cpTo = sqrt(2)."""
    V_cpTo, ga = np.asarray(V_cpTo, float), np.asarray(ga, float)
    Vsq = V_cpTo ** 2.
    return np.sqrt(Vsq / (ga - 1.) / (1. - 0.5 * Vsq))


def Ma_from_mcpTo_APo(mcpTo_APo, ga, supersonic=False):
    """Invert the mass flow function on the requested branch.

    Values above the choking maximum give NaN.
    """
    return _invert(_MCPTO_APO[bool(supersonic)], mcpTo_APo, ga)


def Ma_from_mcpTo_AP(mcpTo_AP, ga):
    return _invert(_MCPTO_AP, mcpTo_AP, ga)


def Ma_from_F_mcpTo(F_mcpTo, ga, supersonic=False):
    """Invert the impulse function on the requested branch.

    Values below the sonic minimum give NaN, as do supersonic values at or
    above the sqrt(2) asymptote.
    """
    return _invert(_F_MCPTO[bool(supersonic)], F_mcpTo, ga)


# Choking area

def Ma_from_A_Acrit(A_Acrit, ga, supersonic=False):
    """Invert the area ratio on the requested branch, NaN for A_Acrit < 1."""
    return _invert(_A_ACRIT[bool(supersonic)], A_Acrit, ga)


# Wave angles

@quiet
def Ma_from_mu(mu):
    return 1. / np.sin(np.asarray(mu, float))


def Ma_from_nu(nu, ga):
    """Invert the Prandtl-Meyer angle, NaN beyond its asymptotic maximum."""
    return _invert(_NU, nu, ga)


# Normal shocks

def Ma_from_Mash(Mash, ga):
    # The post-shock Mach relation is its own inverse
    return fwd.Mash_from_Ma(Mash, ga)


def Ma_from_Posh_Po(Posh_Po, ga):
    return _invert(_POSH_PO, Posh_Po, ga)


@quiet
def Ma_from_Psh_P(Psh_P, ga):
    Psh_P, ga = np.asarray(Psh_P, float), np.asarray(ga, float)
    return np.sqrt(1. + (Psh_P - 1.) * (ga + 1.) / 2. / ga)


@quiet
def Ma_from_rhosh_rho(rhosh_rho, ga):
    rhosh_rho, ga = np.asarray(rhosh_rho, float), np.asarray(ga, float)
    return np.sqrt(2. * rhosh_rho / (ga + 1. - rhosh_rho * (ga - 1.)))


@quiet
def Ma_from_Tsh_T(Tsh_T, ga):
    """Positive root of the temperature jump, a quadratic in Ma^2."""
    Tsh_T, ga = np.asarray(Tsh_T, float), np.asarray(ga, float)
    gm1 = ga - 1.
    a = 2. * ga * gm1
    b = 4. * ga - gm1 ** 2. - (ga + 1.) ** 2. * Tsh_T
    Masq = (-b + np.sqrt(b ** 2. + 4. * a * 2. * gm1)) / 2. / a
    return np.sqrt(Masq)


def Ma_from_ash_a(ash_a, ga):
    return Ma_from_Tsh_T(np.asarray(ash_a, float) ** 2., ga)


_TO_MA = {
    'To_T': Ma_from_To_T,
    'Po_P': Ma_from_Po_P,
    'rhoo_rho': Ma_from_rhoo_rho,
    'V_cpTo': Ma_from_V_cpTo,
    'mcpTo_APo': Ma_from_mcpTo_APo,
    'mcpTo_AP': Ma_from_mcpTo_AP,
    'F_mcpTo': Ma_from_F_mcpTo,
    'A_Acrit': Ma_from_A_Acrit,
    'mu': lambda mu, ga: Ma_from_mu(mu),
    'nu': Ma_from_nu,
    'Mash': Ma_from_Mash,
    'Posh_Po': Ma_from_Posh_Po,
    'Psh_P': Ma_from_Psh_P,
    'rhosh_rho': Ma_from_rhosh_rho,
    'Tsh_T': Ma_from_Tsh_T,
    'ash_a': Ma_from_ash_a,
}

# Quantities with both a subsonic and a supersonic solution
_BRANCHED = ['mcpTo_APo', 'F_mcpTo', 'A_Acrit']


def to_Ma(var, Y_in, ga, supersonic=False):
    """Mach number for a named quantity.

    The supersonic flag picks the branch for quantities with two solutions
    and is ignored otherwise. Returns NaN where no solution exists.
    """
    try:
        fun = _TO_MA[var]
    except KeyError:
        raise ValueError('Invalid quantity requested: {}.'.format(var))

    if var in _BRANCHED:
        return fun(Y_in, ga, supersonic)
    else:
        return fun(Y_in, ga)
