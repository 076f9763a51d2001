#
# Derivatives of the compressible flow quantities with respect to Mach number
#
import numpy as np

from .forward import quiet, Malimsh, ash_a_from_Ma, _To_T


# Simple ratios

def derivative_To_T_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return (ga - 1.) * Ma


@quiet
def derivative_Po_P_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return ga * Ma * _To_T(Ma, ga) ** (1. / (ga - 1.))


@quiet
def derivative_rhoo_rho_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return Ma * _To_T(Ma, ga) ** (1. / (ga - 1.) - 1.)


# Velocity and mass flow functions

@quiet
def derivative_V_cpTo_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return np.sqrt(ga - 1.) * _To_T(Ma, ga) ** -1.5


@quiet
def derivative_mcpTo_APo_from_Ma(Ma, ga):
    """Zero at Ma = 1 where the mass flow function peaks."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gp1 = ga + 1.
    n = 0.5 * gp1 / (ga - 1.)
    To_T = _To_T(Ma, ga)
    return ga / np.sqrt(ga - 1.) * (
        To_T ** -n - 0.5 * gp1 * Ma ** 2. * To_T ** (-n - 1.))


@quiet
def derivative_mcpTo_AP_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    To_T = _To_T(Ma, ga)
    return ga / np.sqrt(ga - 1.) * (
        To_T ** 0.5 + 0.5 * (ga - 1.) * Ma ** 2. * To_T ** -0.5)


@quiet
def derivative_F_mcpTo_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return (np.sqrt(ga - 1.) / ga * (1. - Ma ** -2.)
            * _To_T(Ma, ga) ** -1.5)


# Choking area

@quiet
def derivative_A_Acrit_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gp1 = ga + 1.
    To_T = _To_T(Ma, ga)
    return ((2. / gp1 * To_T) ** (0.5 * gp1 / (ga - 1.))
            * (-Ma ** -2. + 0.5 * gp1 / To_T))


# Wave angles

@quiet
def derivative_mu_from_Ma(Ma):
    Ma = np.asarray(Ma, float)
    return -1. / (Ma * np.sqrt(Ma ** 2. - 1.))


@quiet
def derivative_nu_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    return np.sqrt(Ma ** 2. - 1.) / (Ma * _To_T(Ma, ga))


# Normal shocks

@quiet
def derivative_Mash_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    A = (ga + 1.) ** 2. * Ma / np.sqrt(2.)
    C = ga * (2. * Ma ** 2. - 1.) + 1.
    der = -A * _To_T(Ma, ga) ** -0.5 * C ** -1.5
    return np.where(Ma > Malimsh(ga), der, np.nan)


@quiet
def derivative_Posh_Po_from_Ma(Ma, ga):
    """Zero at Ma = 1, the flow is isentropic to second order."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    gm1 = ga - 1.
    gp1 = ga + 1.
    To_T = _To_T(Ma, ga)
    A = ga * Ma * (Ma ** 2. - 1.) ** 2. / To_T ** 2.
    B = 0.5 * gp1 * Ma ** 2. / To_T
    C = 2. * ga / gp1 * Ma ** 2. - gm1 / gp1
    der = -A * B ** (1. / gm1) * C ** (-ga / gm1)
    return np.where(Ma > Malimsh(ga), der, np.nan)


@quiet
def derivative_Psh_P_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    der = 4. * ga / (ga + 1.) * Ma
    return np.where(Ma > Malimsh(ga), der, np.nan)


@quiet
def derivative_rhosh_rho_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    der = 4. * (ga + 1.) * Ma / ((ga - 1.) * Ma ** 2. + 2.) ** 2.
    return np.where(Ma > Malimsh(ga), der, np.nan)


@quiet
def derivative_Tsh_T_from_Ma(Ma, ga):
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    der = 4. * (ga - 1.) * (ga * Ma ** 4. + 1.) / ((ga + 1.) ** 2. * Ma ** 3.)
    return np.where(Ma > Malimsh(ga), der, np.nan)


@quiet
def derivative_ash_a_from_Ma(Ma, ga):
    return 0.5 * derivative_Tsh_T_from_Ma(Ma, ga) / ash_a_from_Ma(Ma, ga)


_DERIVATIVE_FROM_MA = {
    'To_T': derivative_To_T_from_Ma,
    'Po_P': derivative_Po_P_from_Ma,
    'rhoo_rho': derivative_rhoo_rho_from_Ma,
    'V_cpTo': derivative_V_cpTo_from_Ma,
    'mcpTo_APo': derivative_mcpTo_APo_from_Ma,
    'mcpTo_AP': derivative_mcpTo_AP_from_Ma,
    'F_mcpTo': derivative_F_mcpTo_from_Ma,
    'A_Acrit': derivative_A_Acrit_from_Ma,
    'mu': lambda Ma, ga: derivative_mu_from_Ma(Ma),
    'nu': derivative_nu_from_Ma,
    'Mash': derivative_Mash_from_Ma,
    'Posh_Po': derivative_Posh_Po_from_Ma,
    'Psh_P': derivative_Psh_P_from_Ma,
    'rhosh_rho': derivative_rhosh_rho_from_Ma,
    'Tsh_T': derivative_Tsh_T_from_Ma,
    'ash_a': derivative_ash_a_from_Ma,
}


def derivative_from_Ma(var, Ma, ga):
    """Derivative of a named quantity with respect to Mach number."""
    try:
        fun = _DERIVATIVE_FROM_MA[var]
    except KeyError:
        raise ValueError('Invalid quantity requested: {}.'.format(var))
    return fun(Ma, ga)
