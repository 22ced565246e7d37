"""NASA NeoWs feed records -> `Asteroid`.

A NeoWs feed looks like::

    {"near_earth_objects": {"2024-06-01": [<record>, ...], ...}, ...}

and each record carries (only the fields used here)::

    id, name, nasa_jpl_url, absolute_magnitude_h,
    estimated_diameter.kilometers.estimated_diameter_min/max,
    is_potentially_hazardous_asteroid,
    close_approach_data[0].close_approach_date,
    close_approach_data[0].relative_velocity.kilometers_per_second  (str),
    close_approach_data[0].miss_distance.kilometers                 (str)
"""
import logging
import math
import re
from numbers import Real

from astropy.time import Time

from .bodies import Asteroid
from .exceptions import (
    FieldMissingError,
    NeoRecordError,
    NumericParseError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)

# Plain decimal or exponent notation, as NeoWs serves its numeric strings
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")

__all__ = [
    "parse_neo_record",
    "select_neo",
    "normalize_date",
]


def normalize_date(date):
    """Return `date` as ``"YYYY-MM-DD"``.

    Parameters
    ----------
    date : str, `~datetime.datetime`, or `~astropy.time.Time`
        Anything `~astropy.time.Time` understands, e.g. ``"2024-06-01"`` or
        ``"2024-06-01T12:00"``.

    Raises
    ------
    ValueError
        If `date` cannot be interpreted as a date.
    """
    try:
        return Time(date, scale="utc").strftime("%Y-%m-%d")
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid date {date!r}; expected YYYY-MM-DD.") from e


def _get(obj, key, path):
    """``obj[key]``, raising the record errors instead of KeyError etc."""
    if isinstance(key, int):
        if not isinstance(obj, (list, tuple)):
            raise TypeMismatchError(
                f"`{path}` must be a list, got {type(obj).__name__}."
            )
        try:
            return obj[key]
        except IndexError:
            raise FieldMissingError(f"{path}[{key}]") from None

    if not isinstance(obj, dict):
        raise TypeMismatchError(f"`{path}` must be a mapping, got {type(obj).__name__}.")
    try:
        val = obj[key]
    except KeyError:
        raise FieldMissingError(f"{path}.{key}" if path else key) from None
    if val is None:
        raise FieldMissingError(f"{path}.{key}" if path else key)
    return val


def _dig(record, *keys, path=""):
    """Follow `keys` into the nested `record`, tracking the dotted path."""
    obj = record
    for key in keys:
        obj = _get(obj, key, path)
        path = f"{path}[{key}]" if isinstance(key, int) else (f"{path}.{key}" if path else key)
    return obj, path


def _as_float(val, path):
    """Numeric JSON value -> finite float."""
    if isinstance(val, bool) or not isinstance(val, Real):
        raise TypeMismatchError(f"`{path}` must be a number, got {type(val).__name__}.")
    val = float(val)
    if not math.isfinite(val):
        raise NumericParseError(f"`{path}` is not finite: {val}")
    return val


def _as_float_str(val, path):
    """Numeric-valued string (or number) -> float."""
    if isinstance(val, str):
        # float() alone would also take "nan", "inf" and "1_000"
        if not _NUMERIC_RE.match(val):
            raise NumericParseError(f"`{path}` is not numeric: {val!r}")
        val = float(val)
    return _as_float(val, path)


def _as_str(val, path):
    if isinstance(val, (dict, list, bool)):
        raise TypeMismatchError(f"`{path}` must be a string, got {type(val).__name__}.")
    return str(val)


def parse_neo_record(record):
    """Create an `Asteroid` from one NeoWs record.

    Parameters
    ----------
    record : dict
        A single object from a NeoWs feed or lookup response.

    Returns
    -------
    asteroid : `~neoanalyzer.bodies.Asteroid`
        The mass is estimated from the diameter range. Only the first entry of
        ``close_approach_data`` is used.

    Raises
    ------
    FieldMissingError
        A required field is absent or ``close_approach_data`` is empty.
    TypeMismatchError
        A field has a wrong type (e.g. a mapping where a number is expected).
    NumericParseError
        The relative velocity or miss distance string is not a number.
    """
    if not isinstance(record, dict):
        raise TypeMismatchError(f"NEO record must be a mapping, got {type(record).__name__}.")

    neo_id = _as_str(*_dig(record, "id"))
    name = _as_str(*_dig(record, "name"))
    nasa_jpl_url = record.get("nasa_jpl_url") or ""
    absolute_magnitude = _as_float(*_dig(record, "absolute_magnitude_h"))

    dmin = _as_float(
        *_dig(record, "estimated_diameter", "kilometers", "estimated_diameter_min")
    )
    dmax = _as_float(
        *_dig(record, "estimated_diameter", "kilometers", "estimated_diameter_max")
    )

    hazardous, path = _dig(record, "is_potentially_hazardous_asteroid")
    if not isinstance(hazardous, bool):
        raise TypeMismatchError(f"`{path}` must be a bool, got {type(hazardous).__name__}.")

    approach, ca_path = _dig(record, "close_approach_data", 0)
    close_approach_date = _as_str(*_dig(approach, "close_approach_date", path=ca_path))
    relative_velocity_km_s = _as_float_str(
        *_dig(approach, "relative_velocity", "kilometers_per_second", path=ca_path)
    )
    miss_distance_km = _as_float_str(
        *_dig(approach, "miss_distance", "kilometers", path=ca_path)
    )

    n_approach = len(record["close_approach_data"])
    if n_approach > 1:
        logger.debug("%s: using the first of %d close approaches", name, n_approach)

    try:
        asteroid = Asteroid(
            name=name,
            id=neo_id,
            nasa_jpl_url=str(nasa_jpl_url),
            absolute_magnitude=absolute_magnitude,
            min_diameter_km=dmin,
            max_diameter_km=dmax,
            is_hazardous=hazardous,
            close_approach_date=close_approach_date,
            relative_velocity_km_s=relative_velocity_km_s,
            miss_distance_km=miss_distance_km,
        )
    except ValueError as e:
        raise NeoRecordError(f"Invalid NEO record {neo_id}: {e}") from e

    logger.debug("Parsed NEO %s (%s)", neo_id, name)
    return asteroid


def select_neo(feed, date, index=0):
    """Pick one NEO record of `date` from a NeoWs feed.

    Parameters
    ----------
    feed : dict
        Parsed NeoWs feed with a ``"near_earth_objects"`` mapping of date
        string to list of records.

    date : str
        The close-approach date, ``"YYYY-MM-DD"``.

    index : int, optional
        Which of the records listed under `date` to take. Default is ``0``,
        i.e., the first one.

    Returns
    -------
    record : dict
        The selected record, or an empty `dict` if there is none.

    Raises
    ------
    ValueError
        If `feed` is not shaped like a NeoWs feed (e.g., a JSON list, or
        ``near_earth_objects`` not being a mapping of date to list).
    """
    date = normalize_date(date)
    if feed is None:
        feed = {}
    if not isinstance(feed, dict):
        raise ValueError(f"NeoWs feed must be a mapping, got {type(feed).__name__}.")

    neos = feed.get("near_earth_objects", {})
    if not isinstance(neos, dict):
        raise ValueError(
            f"`near_earth_objects` must be a mapping, got {type(neos).__name__}."
        )

    records = neos.get(date) or []
    if not isinstance(records, list):
        raise ValueError(
            f"`near_earth_objects[{date!r}]` must be a list, got {type(records).__name__}."
        )
    if not records:
        logger.info("No NEO listed for %s", date)
        return {}
    if not 0 <= index < len(records):
        logger.info("Only %d NEOs listed for %s; index %d is out of range", len(records), date, index)
        return {}
    return records[index]
