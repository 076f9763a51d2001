#
# Compressible flow quantities as explicit functions of Mach number
#
# Stagnation-to-static convention throughout: 'Po_P' is stagnation over
# static pressure, 'Posh_Po' is post-shock over pre-shock stagnation pressure.
#
import functools

import numpy as np


def quiet(fun):
    """Evaluate fun with floating point warnings off, so NaN and Inf propagate."""
    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return fun(*args, **kwargs)
    return wrapper


def _To_T(Ma, ga):
    return 1. + 0.5 * (ga - 1.) * Ma ** 2.


# Simple ratios

@quiet
def To_T_from_Ma(Ma, ga):
    """Stagnation to static temperature ratio."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return _To_T(Ma, ga)


@quiet
def Po_P_from_Ma(Ma, ga):
    """Stagnation to static pressure ratio."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return _To_T(Ma, ga) ** (ga / (ga - 1.))


@quiet
def rhoo_rho_from_Ma(Ma, ga):
    """Stagnation to static density ratio."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return _To_T(Ma, ga) ** (1. / (ga - 1.))


# Velocity and mass flow functions

@quiet
def V_cpTo_from_Ma(Ma, ga):
    """Non-dimensional velocity V/sqrt(cp*To)."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return np.sqrt(ga - 1.) * Ma * _To_T(Ma, ga) ** -0.5


@quiet
def mcpTo_APo_from_Ma(Ma, ga):
    """Non-dimensional mass flow function based on stagnation pressure.

    Peaks at Ma = 1, the choking value.
    """
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gp1_gm1 = (ga + 1.) / (ga - 1.)
    return ga / np.sqrt(ga - 1.) * Ma * _To_T(Ma, ga) ** (-0.5 * gp1_gm1)


@quiet
def mcpTo_AP_from_Ma(Ma, ga):
    """Non-dimensional mass flow function based on static pressure."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return ga / np.sqrt(ga - 1.) * Ma * _To_T(Ma, ga) ** 0.5


@quiet
def F_mcpTo_from_Ma(Ma, ga):
    """Non-dimensional impulse function (P + rho*V^2)*A / (m*sqrt(cp*To)).

    Has a minimum at Ma = 1 and tends to sqrt(2) as Ma goes to infinity.
    """
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return (np.sqrt(ga - 1.) / ga * (1. + ga * Ma ** 2.) / Ma
            * _To_T(Ma, ga) ** -0.5)


# Choking area

@quiet
def A_Acrit_from_Ma(Ma, ga):
    """Ratio of flow area to the sonic throat area, one at Ma = 1."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gp1 = ga + 1.
    gp1_gm1 = gp1 / (ga - 1.)
    return 1. / Ma * (2. / gp1 * _To_T(Ma, ga)) ** (0.5 * gp1_gm1)


# Wave angles

@quiet
def mu_from_Ma(Ma):
    """Mach angle in radians."""
    return np.arcsin(1. / np.asarray(Ma, float))


@quiet
def nu_from_Ma(Ma, ga):
    """Prandtl-Meyer angle in radians, zero at Ma = 1."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gp1_gm1 = (ga + 1.) / (ga - 1.)
    Masq_m1 = Ma ** 2. - 1.
    return (np.sqrt(gp1_gm1) * np.arctan(np.sqrt(Masq_m1 / gp1_gm1))
            - np.arctan(np.sqrt(Masq_m1)))


# Normal shocks

@quiet
def Malimsh(ga):
    """Mathematical limit on pre-shock Mach number for the shock relations."""
    ga = np.asarray(ga, float)
    return np.sqrt((ga - 1.) / ga / 2.)


def _above_Malimsh(Ma, ga, val):
    # Below the limit the post-shock denominators change sign
    return np.where(Ma > Malimsh(ga), val, np.nan)


@quiet
def Mash_from_Ma(Ma, ga):
    """Post-shock Mach number."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    Mash = (_To_T(Ma, ga) / (ga * Ma ** 2. - 0.5 * (ga - 1.))) ** 0.5
    return _above_Malimsh(Ma, ga, Mash)


@quiet
def Posh_Po_from_Ma(Ma, ga):
    """Stagnation pressure ratio across a normal shock."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gm1 = ga - 1.
    gp1 = ga + 1.
    A = 0.5 * gp1 * Ma ** 2. / _To_T(Ma, ga)
    B = 2. * ga / gp1 * Ma ** 2. - gm1 / gp1
    return _above_Malimsh(Ma, ga, A ** (ga / gm1) * B ** (-1. / gm1))


@quiet
def Psh_P_from_Ma(Ma, ga):
    """Static pressure ratio across a normal shock."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    Psh_P = 1. + 2. * ga / (ga + 1.) * (Ma ** 2. - 1.)
    return _above_Malimsh(Ma, ga, Psh_P)


@quiet
def rhosh_rho_from_Ma(Ma, ga):
    """Static density ratio across a normal shock."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    rhosh_rho = (ga + 1.) * Ma ** 2. / ((ga - 1.) * Ma ** 2. + 2.)
    return _above_Malimsh(Ma, ga, rhosh_rho)


@quiet
def Tsh_T_from_Ma(Ma, ga):
    """Static temperature ratio across a normal shock."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gm1 = ga - 1.
    Masq = Ma ** 2.
    Tsh_T = (2. + gm1 * Masq) * (2. * ga * Masq - gm1) / ((ga + 1.) ** 2. * Masq)
    return _above_Malimsh(Ma, ga, Tsh_T)


@quiet
def ash_a_from_Ma(Ma, ga):
    """Speed of sound ratio across a normal shock."""
    return np.sqrt(Tsh_T_from_Ma(Ma, ga))


_FROM_MA = {
    'To_T': To_T_from_Ma,
    'Po_P': Po_P_from_Ma,
    'rhoo_rho': rhoo_rho_from_Ma,
    'V_cpTo': V_cpTo_from_Ma,
    'mcpTo_APo': mcpTo_APo_from_Ma,
    'mcpTo_AP': mcpTo_AP_from_Ma,
    'F_mcpTo': F_mcpTo_from_Ma,
    'A_Acrit': A_Acrit_from_Ma,
    'mu': lambda Ma, ga: mu_from_Ma(Ma),
    'nu': nu_from_Ma,
    'Mash': Mash_from_Ma,
    'Posh_Po': Posh_Po_from_Ma,
    'Psh_P': Psh_P_from_Ma,
    'rhosh_rho': rhosh_rho_from_Ma,
    'Tsh_T': Tsh_T_from_Ma,
    'ash_a': ash_a_from_Ma,
}


def from_Ma(var, Ma, ga):
    """Evaluate a named quantity at Mach number Ma."""
    try:
        fun = _FROM_MA[var]
    except KeyError:
        raise ValueError('Invalid quantity requested: {}.'.format(var))
    return fun(Ma, ga)
