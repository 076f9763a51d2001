#
# Weak oblique shock relations
#
# All angles in radians. theta is the flow deflection, beta the wave angle
# measured from the upstream flow direction. Only the weak solution is
# computed; deflections beyond the detachment limit give NaN.
#
import numpy as np

from . import forward as fwd
from .forward import quiet
from .solve import find_root


@quiet
def theta_from_Ma(Ma, beta, ga):
    """Flow deflection for a given wave angle, the theta-beta-Mach relation."""
    Ma, beta, ga = [np.asarray(x, float) for x in (Ma, beta, ga)]
    Masq = Ma ** 2.
    tan_theta = (2. / np.tan(beta) * (Masq * np.sin(beta) ** 2. - 1.)
                 / (Masq * (ga + np.cos(2. * beta)) + 2.))
    return np.arctan(tan_theta)


@quiet
def beta_max_from_Ma(Ma, ga):
    """Wave angle at the maximum deflection, dividing weak and strong shocks."""
    Ma, ga = np.asarray(Ma, float), np.asarray(ga, float)
    Masq = Ma ** 2.
    gp1 = ga + 1.
    root = np.sqrt(gp1 * (1. + 0.5 * (ga - 1.) * Masq + gp1 / 16. * Masq ** 2.))
    return np.arcsin(np.sqrt((0.25 * gp1 * Masq - 1. + root) / ga / Masq))


def theta_max_from_Ma(Ma, ga):
    """Largest deflection an attached shock can turn the flow through."""
    return theta_from_Ma(Ma, beta_max_from_Ma(Ma, ga), ga)


def beta_from_Ma(Ma, theta, ga):
    """Wave angle of the weak oblique shock for a given deflection.

    Bisects the theta-beta-Mach relation between the Mach angle, where the
    deflection is zero, and the wave angle at maximum deflection. Returns
    NaN for detached shocks and negative deflections.
    """
    Ma, theta, ga = np.broadcast_arrays(*[np.asarray(x, float)
                                          for x in (Ma, theta, ga)])

    def err(beta):
        return theta_from_Ma(Ma, beta, ga) - theta

    beta_lim = (fwd.mu_from_Ma(Ma), beta_max_from_Ma(Ma, ga))
    return find_root(err, beta_lim)


def _Ma_normal(Ma, theta, ga):
    beta = beta_from_Ma(Ma, theta, ga)
    return beta, np.asarray(Ma, float) * np.sin(beta)


# Downstream quantities follow from the normal shock relations applied to the
# normal component of the upstream Mach number

@quiet
def oblique_Mash_from_Ma(Ma, theta, ga):
    """Post-shock Mach number."""
    beta, Man = _Ma_normal(Ma, theta, ga)
    return fwd.Mash_from_Ma(Man, ga) / np.sin(beta - np.asarray(theta, float))


def oblique_Posh_Po_from_Ma(Ma, theta, ga):
    """Stagnation pressure ratio across the shock."""
    return fwd.Posh_Po_from_Ma(_Ma_normal(Ma, theta, ga)[1], ga)


def oblique_Psh_P_from_Ma(Ma, theta, ga):
    """Static pressure ratio across the shock."""
    return fwd.Psh_P_from_Ma(_Ma_normal(Ma, theta, ga)[1], ga)


def oblique_rhosh_rho_from_Ma(Ma, theta, ga):
    """Static density ratio across the shock."""
    return fwd.rhosh_rho_from_Ma(_Ma_normal(Ma, theta, ga)[1], ga)


def oblique_Tsh_T_from_Ma(Ma, theta, ga):
    """Static temperature ratio across the shock."""
    return fwd.Tsh_T_from_Ma(_Ma_normal(Ma, theta, ga)[1], ga)


def oblique_ash_a_from_Ma(Ma, theta, ga):
    """Speed of sound ratio across the shock."""
    return fwd.ash_a_from_Ma(_Ma_normal(Ma, theta, ga)[1], ga)
