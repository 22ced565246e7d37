"""Physical properties of space bodies derived from size, mass and speed.

All public functions take the "catalog" units (km, kg, km/s) and convert to SI
internally. Inputs may be scalars or array-likes (numpy broadcasting applies).
"""
import numpy as np

from .configs import ASTEROID_DENSITY, GRAV_CONST, MEGATON_TNT_J
from .exceptions import DomainError

__all__ = [
    "km2m",
    "kmps2mps",
    "mps2kmps",
    "joule2megaton",
    "sphere_volume",
    "estimate_mass",
    "surface_gravity",
    "escape_velocity",
    "impact_energy",
]


def km2m(x):
    """Convert km to m."""
    return x * 1000.0


def kmps2mps(x):
    """Convert km/s to m/s."""
    return x * 1000.0


def mps2kmps(x):
    """Convert m/s to km/s."""
    return x / 1000.0


def joule2megaton(x):
    """Convert J to megatons of TNT."""
    return x / MEGATON_TNT_J


def sphere_volume(diameter_m):
    """Volume of a sphere [m^3] of the given diameter [m]."""
    radius_m = np.asarray(diameter_m, dtype=float) / 2.0
    return (4.0 / 3.0) * np.pi * radius_m**3


def _radius_m(diameter_km, funcname):
    """Radius in meters, refusing non-positive diameters."""
    diameter_km = np.asarray(diameter_km, dtype=float)
    if np.any(diameter_km <= 0):
        raise DomainError(
            f"`{funcname}` requires a positive diameter, got {diameter_km} km."
        )
    return km2m(diameter_km) / 2.0


def estimate_mass(min_diameter_km, max_diameter_km, density_kg_m3=ASTEROID_DENSITY):
    """Estimate the mass of an asteroid from its diameter range.

    Parameters
    ----------
    min_diameter_km, max_diameter_km : float or array_like
        The minimum and maximum estimated diameters in km.

    density_kg_m3 : float, optional
        The assumed bulk density in kg/m^3. Default is
        `~neoanalyzer.configs.ASTEROID_DENSITY` (3000, stony asteroid).

    Returns
    -------
    mass_kg : float or ndarray
        The estimated mass in kg.

    Notes
    -----
    Each diameter is treated as a sphere and the two volumes are averaged:

    .. math::
        M = \\rho \\frac{V(d_\\mathrm{min}) + V(d_\\mathrm{max})}{2}

    This is different from the volume of the averaged diameter,
    :math:`V((d_\\mathrm{min} + d_\\mathrm{max})/2)`, which is biased toward
    the midpoint size. When ``min == max`` both reduce to the simple sphere
    mass, and ``estimate_mass(0, 0) == 0``.
    """
    dmin = np.asarray(min_diameter_km, dtype=float)
    dmax = np.asarray(max_diameter_km, dtype=float)
    if np.any(dmin < 0) or np.any(dmax < 0):
        raise DomainError(
            f"Diameters must be non-negative, got min={dmin} km, max={dmax} km."
        )

    avg_volume = 0.5 * (sphere_volume(km2m(dmin)) + sphere_volume(km2m(dmax)))
    mass = density_kg_m3 * avg_volume
    return mass.item() if np.ndim(mass) == 0 else mass


def surface_gravity(diameter_km, mass_kg):
    """Surface gravity [m/s^2] of a spherical body.

    Parameters
    ----------
    diameter_km : float or array_like
        The diameter in km. Must be positive.

    mass_kg : float or array_like
        The mass in kg.

    Raises
    ------
    DomainError
        If any `diameter_km` is zero or negative (the formula divides by the
        radius squared).
    """
    r_m = _radius_m(diameter_km, "surface_gravity")
    g = GRAV_CONST * np.asarray(mass_kg, dtype=float) / (r_m * r_m)
    return g.item() if np.ndim(g) == 0 else g


def escape_velocity(diameter_km, mass_kg):
    """Escape velocity [km/s] from the surface of a spherical body.

    Parameters
    ----------
    diameter_km : float or array_like
        The diameter in km. Must be positive.

    mass_kg : float or array_like
        The mass in kg.

    Raises
    ------
    DomainError
        If any `diameter_km` is zero or negative.
    """
    r_m = _radius_m(diameter_km, "escape_velocity")
    v_mps = np.sqrt(2 * GRAV_CONST * np.asarray(mass_kg, dtype=float) / r_m)
    v = mps2kmps(v_mps)
    return v.item() if np.ndim(v) == 0 else v


def impact_energy(mass_kg, relative_velocity_km_s):
    """Kinetic energy of an impactor in megatons of TNT.

    Parameters
    ----------
    mass_kg : float or array_like
        The impactor mass in kg.

    relative_velocity_km_s : float or array_like
        The impact (relative) velocity in km/s.

    Notes
    -----
    :math:`E = \\frac{1}{2} m v^2` in J, divided by 4.184e15 J/Mt.
    """
    v_mps = kmps2mps(np.asarray(relative_velocity_km_s, dtype=float))
    energy_j = 0.5 * np.asarray(mass_kg, dtype=float) * v_mps**2
    energy = joule2megaton(energy_j)
    return energy.item() if np.ndim(energy) == 0 else energy
