"""
Functions to calculate one-dimensional compressible flow quantities.

Isentropic relations, normal shocks and weak oblique shocks for a perfect gas
with ratio of specific heats ga. Quantities are named by their symbols, e.g.
'Po_P' is the ratio of stagnation to static pressure, and each is available
as a named function or through the from_Ma, derivative_from_Ma and to_Ma
dispatchers. All functions accept scalars or numpy arrays.

There is no input checking: non-physical inputs, such as ga < 1 or Ma < 1 for
a shock, give meaningless numbers or NaN. Inversions that have no solution
return NaN rather than raising.
"""
from .forward import (
    from_Ma,
    To_T_from_Ma,
    Po_P_from_Ma,
    rhoo_rho_from_Ma,
    V_cpTo_from_Ma,
    mcpTo_APo_from_Ma,
    mcpTo_AP_from_Ma,
    F_mcpTo_from_Ma,
    A_Acrit_from_Ma,
    mu_from_Ma,
    nu_from_Ma,
    Malimsh,
    Mash_from_Ma,
    Posh_Po_from_Ma,
    Psh_P_from_Ma,
    rhosh_rho_from_Ma,
    Tsh_T_from_Ma,
    ash_a_from_Ma,
)
from .derivative import (
    derivative_from_Ma,
    derivative_To_T_from_Ma,
    derivative_Po_P_from_Ma,
    derivative_rhoo_rho_from_Ma,
    derivative_V_cpTo_from_Ma,
    derivative_mcpTo_APo_from_Ma,
    derivative_mcpTo_AP_from_Ma,
    derivative_F_mcpTo_from_Ma,
    derivative_A_Acrit_from_Ma,
    derivative_mu_from_Ma,
    derivative_nu_from_Ma,
    derivative_Mash_from_Ma,
    derivative_Posh_Po_from_Ma,
    derivative_Psh_P_from_Ma,
    derivative_rhosh_rho_from_Ma,
    derivative_Tsh_T_from_Ma,
    derivative_ash_a_from_Ma,
)
from .inverse import (
    to_Ma,
    Ma_from_To_T,
    Ma_from_Po_P,
    Ma_from_rhoo_rho,
    Ma_from_V_cpTo,
    Ma_from_mcpTo_APo,
    Ma_from_mcpTo_AP,
    Ma_from_F_mcpTo,
    Ma_from_A_Acrit,
    Ma_from_mu,
    Ma_from_nu,
    Ma_from_Mash,
    Ma_from_Posh_Po,
    Ma_from_Psh_P,
    Ma_from_rhosh_rho,
    Ma_from_Tsh_T,
    Ma_from_ash_a,
)
from .oblique import (
    theta_from_Ma,
    beta_max_from_Ma,
    theta_max_from_Ma,
    beta_from_Ma,
    oblique_Mash_from_Ma,
    oblique_Posh_Po_from_Ma,
    oblique_Psh_P_from_Ma,
    oblique_rhosh_rho_from_Ma,
    oblique_Tsh_T_from_Ma,
    oblique_ash_a_from_Ma,
)

__version__ = '0.1.0'
