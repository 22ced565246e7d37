"""Planets and asteroids as physical bodies.

`Planet` and `Asteroid` are frozen dataclasses sharing the `SpaceBody`
capability (name, diameter, mass, surface gravity, info display). Two asteroids
can be merged with `combine_asteroids`, which always returns a new object.
"""
from dataclasses import dataclass, field, replace
import logging

import numpy as np
import pandas as pd

from .configs import (
    ASTEROID_DENSITY,
    HAZARD_MIN_DIAMETER_KM,
    HAZARD_VELOCITY_KM_S,
    PLANETS,
)
from .exceptions import DomainError
from .physics import escape_velocity, estimate_mass, impact_energy, surface_gravity

logger = logging.getLogger(__name__)

__all__ = [
    "SpaceBody",
    "Planet",
    "Asteroid",
    "combine_asteroids",
    "is_hazardous_combined",
    "load_planets",
    "bodies_table",
]


class SpaceBody:
    """Capability shared by all bodies.

    Subclasses must provide ``name``, ``diameter_km`` and ``mass_kg``
    attributes and may extend `_derived` with more derived quantities.
    """

    name: str
    diameter_km: float
    mass_kg: float

    def surface_gravity(self):
        """Surface gravity [m/s^2]. Raises `DomainError` for zero diameter."""
        return surface_gravity(self.diameter_km, self.mass_kg)

    def _basic(self):
        return {
            "Name": self.name,
            "Diameter [km]": self.diameter_km,
            "Mass [kg]": self.mass_kg,
        }

    def _derived(self):
        """Derived quantities as (label, callable) pairs."""
        return [("Surface Gravity [m/s^2]", self.surface_gravity)]

    def info(self):
        """All attributes and derived quantities as an ordered `dict`.

        A derived quantity that is undefined for this body (`DomainError`) is
        reported as NaN instead of failing the whole display.
        """
        info = self._basic()
        for label, func in self._derived():
            try:
                info[label] = func()
            except DomainError as e:
                logger.warning("%s: %s is undefined (%s)", self.name, label, e)
                info[label] = np.nan
        return info

    def format_info(self):
        """Human-readable, one ``label: value`` per line."""
        lines = []
        for key, val in self.info().items():
            if isinstance(val, bool):
                val = "Yes" if val else "No"
            elif isinstance(val, float):
                val = f"{val:.6g}"
            lines.append(f"{key}: {val}")
        return "\n".join(lines)


@dataclass(frozen=True)
class Planet(SpaceBody):
    """A planet from the fixed catalog (`~neoanalyzer.configs.PLANETS`)."""

    name: str
    diameter_km: float
    mass_kg: float

    def __post_init__(self):
        if not self.diameter_km > 0:
            raise ValueError(f"Planet diameter must be positive, got {self.diameter_km}.")
        if not self.mass_kg >= 0:
            raise ValueError(f"Planet mass must be non-negative, got {self.mass_kg}.")

    def escape_velocity(self):
        """Escape velocity [km/s] from the surface."""
        return escape_velocity(self.diameter_km, self.mass_kg)

    def _derived(self):
        return super()._derived() + [("Escape Velocity [km/s]", self.escape_velocity)]


@dataclass(frozen=True)
class Asteroid(SpaceBody):
    """A near-Earth asteroid seen at one close approach.

    Parameters
    ----------
    name, id, nasa_jpl_url : str
        Identification as given by NeoWs.

    absolute_magnitude : float
        The absolute magnitude H.

    min_diameter_km, max_diameter_km : float
        The estimated diameter range in km (``0 <= min <= max``).

    is_hazardous : bool
        Potentially hazardous flag.

    close_approach_date : str
        Date of the close approach, ``"YYYY-MM-DD"``.

    relative_velocity_km_s, miss_distance_km : float
        Relative velocity [km/s] and miss distance [km] at that approach.

    mass_kg : float, optional
        Leave as `None` (the normal case) to estimate it from the diameter
        range with `~neoanalyzer.physics.estimate_mass` and
        `~neoanalyzer.configs.ASTEROID_DENSITY`.

    Notes
    -----
    ``diameter_km`` is the minimum diameter; it is what `surface_gravity`
    uses.
    """

    name: str
    id: str
    nasa_jpl_url: str
    absolute_magnitude: float
    min_diameter_km: float
    max_diameter_km: float
    is_hazardous: bool
    close_approach_date: str
    relative_velocity_km_s: float
    miss_distance_km: float
    mass_kg: float = field(default=None)

    def __post_init__(self):
        for name in (
            "min_diameter_km",
            "max_diameter_km",
            "relative_velocity_km_s",
            "miss_distance_km",
        ):
            if not np.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)}.")

        if not self.min_diameter_km >= 0:
            raise ValueError(
                f"min_diameter_km must be non-negative, got {self.min_diameter_km}."
            )
        if not self.max_diameter_km >= self.min_diameter_km:
            raise ValueError(
                f"min_diameter_km ({self.min_diameter_km}) > "
                f"max_diameter_km ({self.max_diameter_km})."
            )
        if not self.relative_velocity_km_s >= 0:
            raise ValueError(
                f"relative_velocity_km_s must be non-negative, got {self.relative_velocity_km_s}."
            )
        if not self.miss_distance_km >= 0:
            raise ValueError(
                f"miss_distance_km must be non-negative, got {self.miss_distance_km}."
            )

        if self.mass_kg is None:
            mass = estimate_mass(
                self.min_diameter_km, self.max_diameter_km, ASTEROID_DENSITY
            )
            # frozen dataclass
            object.__setattr__(self, "mass_kg", mass)
        elif not (self.mass_kg >= 0 and np.isfinite(self.mass_kg)):
            raise ValueError(f"mass_kg must be finite and non-negative, got {self.mass_kg}.")

    @property
    def diameter_km(self):
        return self.min_diameter_km

    def impact_energy(self):
        """Impact energy [megatons of TNT] at the close-approach velocity."""
        return impact_energy(self.mass_kg, self.relative_velocity_km_s)

    def _basic(self):
        return {
            "Asteroid ID": self.id,
            "Name": self.name,
            "NASA JPL URL": self.nasa_jpl_url,
            "Absolute Magnitude (H)": self.absolute_magnitude,
            "Diameter (Min) [km]": self.min_diameter_km,
            "Diameter (Max) [km]": self.max_diameter_km,
            "Is Potentially Hazardous": self.is_hazardous,
            "Close Approach Date": self.close_approach_date,
            "Relative Velocity [km/s]": self.relative_velocity_km_s,
            "Miss Distance [km]": self.miss_distance_km,
            "Mass [kg]": self.mass_kg,
        }

    def _derived(self):
        return super()._derived() + [("Impact Energy [Mt TNT]", self.impact_energy)]


def is_hazardous_combined(min_diameter_km, relative_velocity_km_s):
    """Hazard rule applied to combined asteroids.

    `True` if ``min_diameter_km > 280`` or ``relative_velocity_km_s > 5.0``
    (see `~neoanalyzer.configs.HAZARD_MIN_DIAMETER_KM` and
    `~neoanalyzer.configs.HAZARD_VELOCITY_KM_S`).
    """
    return bool(
        (min_diameter_km > HAZARD_MIN_DIAMETER_KM)
        or (relative_velocity_km_s > HAZARD_VELOCITY_KM_S)
    )


def combine_asteroids(a, b):
    """Combine two asteroids into a new synthetic one.

    Parameters
    ----------
    a, b : Asteroid
        The asteroids to combine. Neither is modified.

    Returns
    -------
    combined : Asteroid
        A new asteroid where

          * ``name`` is ``"<a.name> & <b.name>"``,
          * the diameters, mass, relative velocity and miss distance are the
            sums of those of `a` and `b`,
          * ``id``, ``nasa_jpl_url``, ``absolute_magnitude`` and
            ``close_approach_date`` are those of `a`,
          * ``is_hazardous`` is recomputed by `is_hazardous_combined`,
            ignoring the flags of `a` and `b`.

    Notes
    -----
    The order of the operands matters for the identity fields only; all summed
    quantities are symmetric in `a` and `b`.
    """
    if not isinstance(a, Asteroid) or not isinstance(b, Asteroid):
        raise TypeError(
            f"Both operands must be Asteroid, got {type(a).__name__} and {type(b).__name__}."
        )

    min_diameter_km = a.min_diameter_km + b.min_diameter_km
    relative_velocity_km_s = a.relative_velocity_km_s + b.relative_velocity_km_s
    combined = replace(
        a,
        name=f"{a.name} & {b.name}",
        min_diameter_km=min_diameter_km,
        max_diameter_km=a.max_diameter_km + b.max_diameter_km,
        mass_kg=a.mass_kg + b.mass_kg,
        relative_velocity_km_s=relative_velocity_km_s,
        miss_distance_km=a.miss_distance_km + b.miss_distance_km,
        is_hazardous=is_hazardous_combined(min_diameter_km, relative_velocity_km_s),
    )
    logger.debug(
        "Combined %r and %r (hazardous=%s)", a.name, b.name, combined.is_hazardous
    )
    return combined


def load_planets(catalog=None):
    """Build `Planet` objects from a catalog table.

    Parameters
    ----------
    catalog : `~pandas.DataFrame`, optional
        Table with ``name``, ``diameter_km`` and ``mass_kg`` columns. Default
        is `~neoanalyzer.configs.PLANETS`.

    Returns
    -------
    planets : list of Planet
    """
    if catalog is None:
        catalog = PLANETS

    missing = {"name", "diameter_km", "mass_kg"} - set(catalog.columns)
    if missing:
        raise ValueError(f"Planet catalog is missing required columns: {sorted(missing)}")

    return [
        Planet(name=str(row.name), diameter_km=float(row.diameter_km), mass_kg=float(row.mass_kg))
        for row in catalog.itertuples(index=False)
    ]


def bodies_table(bodies):
    """Tabulate `info` of several bodies, one row per body.

    Parameters
    ----------
    bodies : iterable of SpaceBody

    Returns
    -------
    table : `~pandas.DataFrame`
    """
    return pd.DataFrame([body.info() for body in bodies])
