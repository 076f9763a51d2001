#
# Bounded root finders used to invert the compressible flow relations
#
# Neither solver raises on failure: elements that do not converge come back
# as NaN, which propagates through any later arithmetic.
#
# Residual tolerances are multiplied by a scale, the magnitude of the target
# value when inverting a relation, so targets near zero are resolved too.
#
import logging
import warnings

import numpy as np
from scipy.optimize import newton as scipy_newton

logger = logging.getLogger(__name__)

# Default tolerances
TOL = 1e-12  # Newton step size at convergence
FTOL = 1e-9  # Largest residual of an accepted Newton root
XTOL = 1e-12  # Final bracket width for bisection
ATOL = 1e-12  # Residual at a bracket end that counts as an exact root
MAXITER = 50  # Newton iterations

# Upper end of supersonic search domains
MA_MAX = 100.


def _bracket(err, x_lim):
    # Broadcast the bracket ends to the shape of the residual
    lo, hi = np.broadcast_arrays(*[np.asarray(x, float) for x in x_lim])
    with np.errstate(all='ignore'):
        shape = np.broadcast(lo, err(lo)).shape
    lo = np.array(np.broadcast_to(lo, shape))
    hi = np.array(np.broadcast_to(hi, shape))
    return lo, hi


def newton(err, jac, x0, x_lim, tol=TOL, maxiter=MAXITER, ftol=FTOL,
           scale=1.):
    """Newton iteration restricted to a search domain.

    The residual is NaN outside x_lim, so an iterate that leaves the domain
    never converges. A root is accepted only where it is finite, inside the
    domain and has a residual no bigger than ftol*scale; all other elements
    are NaN.
    """
    lo, hi = _bracket(err, x_lim)
    if not lo.size:
        return lo

    # scipy iterates on flat arrays
    def fun(x):
        x = np.reshape(x, lo.shape)
        return np.ravel(np.where((x >= lo) & (x <= hi), err(x), np.nan))

    def fprime(x):
        return np.ravel(jac(np.reshape(x, lo.shape)))

    x_guess = np.ravel(np.broadcast_to(np.asarray(x0, float), lo.shape))

    with np.errstate(all='ignore'), warnings.catch_warnings():
        # Zero derivatives and failed convergence are dealt with below
        warnings.simplefilter('ignore', RuntimeWarning)
        try:
            res = scipy_newton(fun, x_guess, fprime=fprime, tol=tol,
                               maxiter=maxiter, full_output=True, disp=False)
            x = np.reshape(np.asarray(res[0], float), lo.shape)
        except RuntimeError:
            # Array iteration raises when every element fails, whatever disp
            x = np.full(lo.shape, np.nan)
        conv = (np.isfinite(x) & (x >= lo) & (x <= hi)
                & (np.abs(err(x)) <= ftol * scale))

    return np.where(conv, x, np.nan)


def bisect(err, x_lim, xtol=XTOL, atol=ATOL, scale=1.):
    """Vectorised bisection on a bracket holding exactly one root.

    The residual must change sign between the ends of x_lim; an end with
    residual no bigger than atol*scale counts as a root. Elements that are not
    bracketed are NaN. Runs ceil(log2(width/xtol)) halvings.
    """
    # scipy.optimize.bisect is scalar-only and raises on a bad bracket
    lo, hi = _bracket(err, x_lim)

    with np.errstate(all='ignore'):

        def sign(x):
            f = err(x)
            return np.where(np.abs(f) <= atol * scale, 0., np.sign(f))

        slo = sign(lo)
        shi = sign(hi)

        # NaN compares False so undefined ends are rejected too
        ok = slo * shi <= 0.

        # A root at either end collapses the bracket onto it
        hi = np.where(slo == 0., lo, hi)
        lo = np.where(shi == 0., hi, lo)

        width = np.abs(hi - lo)[ok]
        width = width[np.isfinite(width)]
        if width.size and width.max() > xtol:
            niter = int(np.ceil(np.log2(width.max() / xtol)))
        else:
            niter = 0

        for _ in range(niter):
            mid = 0.5 * (lo + hi)
            same = np.sign(err(mid)) == slo
            lo = np.where(same, mid, lo)
            hi = np.where(same, hi, mid)

        x = 0.5 * (lo + hi)

    return np.where(ok, x, np.nan)


def find_root(err, x_lim, jac=None, x0=None, tol=TOL, ftol=FTOL, xtol=XTOL,
              atol=ATOL, maxiter=MAXITER, scale=1.):
    """Find the root of err within x_lim.

    With a derivative jac and initial guess x0, Newton iteration runs first
    and any elements it fails on are bisected over x_lim. Without a
    derivative the whole problem is bisected. Residual tolerances ftol and
    atol are multiplied by scale.
    """
    if jac is None:
        x = bisect(err, x_lim, xtol=xtol, atol=atol, scale=scale)
    else:
        x = newton(err, jac, x0, x_lim, tol=tol, maxiter=maxiter, ftol=ftol,
                   scale=scale)
        fail = np.isnan(x)
        if np.any(fail):
            logger.debug('Newton failed on %d of %d, bisecting',
                         np.count_nonzero(fail), fail.size)
            x = np.where(
                fail, bisect(err, x_lim, xtol=xtol, atol=atol, scale=scale), x)

    nfail = np.count_nonzero(np.isnan(x))
    if nfail:
        logger.debug('No root found for %d of %d', nfail, np.size(x))

    return x[()]
