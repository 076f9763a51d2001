"""Forward relations against tabulated values for ga = 1.4."""

import numpy as np
import pytest

import compflow as cf

GA = [1.1, 1.2, 1.4, 1.67]


class TestIsentropic:

    @pytest.mark.parametrize("Ma, expected", [
        (0.0, 1.0),
        (1.0, 1. / 0.5282817877171742),
        (2.0, 1. / 0.12780452546295096),
    ])
    def test_Po_P(self, Ma, expected):
        assert cf.Po_P_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("Ma, expected", [
        (0.0, 1.0),
        (1.0, 1.2),
        (2.0, 1.8),
    ])
    def test_To_T(self, Ma, expected):
        assert cf.To_T_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("Ma, expected", [
        (0.0, 1.0),
        (1.0, 1. / 0.633938145260609),
        (2.0, 1. / 0.2300481458333117),
    ])
    def test_rhoo_rho(self, Ma, expected):
        assert cf.rhoo_rho_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("Ma, expected", [
        (0.1, 5.821828750000001),
        (1.0, 1.0),
        (2.0, 1.6875),
        (3.0, 4.2346),
    ])
    def test_A_Acrit(self, Ma, expected):
        assert cf.A_Acrit_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-4)

    def test_A_Acrit_infinite_at_rest(self):
        assert np.isinf(cf.A_Acrit_from_Ma(0., 1.4))

    @pytest.mark.parametrize("ga", GA)
    def test_sonic_values(self, ga):
        gp1_2 = (ga + 1.) / 2.
        assert cf.To_T_from_Ma(1., ga) == pytest.approx(gp1_2)
        assert 1. / cf.To_T_from_Ma(1., ga) == pytest.approx(2. / (ga + 1.))
        assert cf.Po_P_from_Ma(1., ga) == pytest.approx(gp1_2 ** (ga / (ga - 1.)))
        assert cf.rhoo_rho_from_Ma(1., ga) == pytest.approx(
            gp1_2 ** (1. / (ga - 1.)))
        assert cf.A_Acrit_from_Ma(1., ga) == pytest.approx(1.)

    def test_choked_mass_flow(self):
        # ga / sqrt(ga - 1) * ((ga + 1) / 2) ** (-(ga + 1) / (ga - 1) / 2)
        assert cf.mcpTo_APo_from_Ma(1., 1.4) == pytest.approx(
            1.4 / np.sqrt(0.4) * 1.2 ** -3.)

    @pytest.mark.parametrize("ga", GA)
    def test_mass_flow_peaks_at_sonic(self, ga):
        Ma = np.linspace(0.1, 3., 59)
        Q = cf.mcpTo_APo_from_Ma(Ma, ga)
        assert Ma[np.argmax(Q)] == pytest.approx(1.)

    @pytest.mark.parametrize("ga", GA)
    def test_mass_flow_functions_consistent(self, ga):
        Ma = np.linspace(0., 3., 7)
        np.testing.assert_allclose(
            cf.mcpTo_AP_from_Ma(Ma, ga),
            cf.mcpTo_APo_from_Ma(Ma, ga) * cf.Po_P_from_Ma(Ma, ga))

    @pytest.mark.parametrize("ga", GA)
    def test_impulse_function_limits(self, ga):
        assert cf.F_mcpTo_from_Ma(1., ga) == pytest.approx(
            np.sqrt(2. * (ga ** 2. - 1.)) / ga)
        assert cf.F_mcpTo_from_Ma(1e4, ga) == pytest.approx(np.sqrt(2.), rel=1e-3)

    def test_velocity_limit(self):
        assert cf.V_cpTo_from_Ma(1e6, 1.4) == pytest.approx(np.sqrt(2.))


class TestWaveAngles:

    def test_mu(self):
        assert cf.mu_from_Ma(2.) == pytest.approx(np.pi / 6.)
        assert cf.mu_from_Ma(1.) == pytest.approx(np.pi / 2.)

    def test_nu(self):
        assert cf.nu_from_Ma(2., 1.4) == pytest.approx(0.4604136818474, rel=1e-10)
        assert cf.nu_from_Ma(1., 1.4) == 0.

    def test_nu_subsonic_undefined(self):
        assert np.isnan(cf.nu_from_Ma(0.5, 1.4))


class TestNormalShock:

    @pytest.mark.parametrize("Ma, expected", [
        (2.0, 0.5773502691896257),
        (5.0, 0.41522739926869984),
    ])
    def test_Mash(self, Ma, expected):
        assert cf.Mash_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-10)

    @pytest.mark.parametrize("Ma, expected", [
        (2.0, 0.7208737),
        (5.0, 0.061716319748617694),
    ])
    def test_Posh_Po(self, Ma, expected):
        assert cf.Posh_Po_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-6)

    @pytest.mark.parametrize("Ma, expected", [
        (2.0, 4.5),
        (5.0, 29.0),
    ])
    def test_Psh_P(self, Ma, expected):
        assert cf.Psh_P_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("Ma, expected", [
        (2.0, 8. / 3.),
        (5.0, 5.0),
    ])
    def test_rhosh_rho(self, Ma, expected):
        assert cf.rhosh_rho_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("Ma, expected", [
        (2.0, 1.6875),
        (5.0, 5.8),
    ])
    def test_Tsh_T(self, Ma, expected):
        assert cf.Tsh_T_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("Ma, expected", [
        (2.0, 1.299038105676658),
        (5.0, 2.408318915758459),
    ])
    def test_ash_a(self, Ma, expected):
        assert cf.ash_a_from_Ma(Ma, 1.4) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("ga", GA)
    def test_sonic_shock_vanishes(self, ga):
        for var in ['Mash', 'Posh_Po', 'Psh_P', 'rhosh_rho', 'Tsh_T', 'ash_a']:
            assert cf.from_Ma(var, 1., ga) == pytest.approx(1.)

    def test_below_limit_is_nan(self):
        Ma = 0.5 * cf.Malimsh(1.4)
        assert np.isnan(cf.Mash_from_Ma(Ma, 1.4))
        assert np.isnan(cf.Posh_Po_from_Ma(Ma, 1.4))


class TestDispatch:

    @pytest.mark.parametrize("var, fun", [
        ('To_T', cf.To_T_from_Ma),
        ('Po_P', cf.Po_P_from_Ma),
        ('mcpTo_APo', cf.mcpTo_APo_from_Ma),
        ('A_Acrit', cf.A_Acrit_from_Ma),
        ('Posh_Po', cf.Posh_Po_from_Ma),
    ])
    def test_from_Ma_matches_named(self, var, fun):
        Ma = np.array([1.2, 2.5])
        np.testing.assert_array_equal(cf.from_Ma(var, Ma, 1.4), fun(Ma, 1.4))

    def test_mu_ignores_ga(self):
        assert cf.from_Ma('mu', 2., 1.4) == cf.mu_from_Ma(2.)

    def test_invalid_quantity(self):
        with pytest.raises(ValueError):
            cf.from_Ma('P_Pcrit', 1., 1.4)

    def test_broadcasting(self):
        Ma = np.linspace(0.5, 2., 4)
        ga = np.array([[1.2], [1.4]])
        assert cf.A_Acrit_from_Ma(Ma, ga).shape == (2, 4)
        assert cf.Mash_from_Ma(Ma, ga).shape == (2, 4)
