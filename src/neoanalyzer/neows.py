# NASA NeoWs (Near Earth Object Web Service) feed retrieval

from functools import lru_cache
from pathlib import Path
import json
import logging
import os
import time

import requests
from dotenv import load_dotenv

from .configs import (
    API_KEY_ENVVAR,
    API_KEY_ENVVAR_ALT,
    BACKOFF_FACTOR,
    DEFAULT_FALLBACK_FILE,
    NEOWS_FEED_URL,
    REQUEST_TIMEOUT,
    RETRIES,
)
from .neorecord import normalize_date

logger = logging.getLogger(__name__)

__all__ = [
    "get_api_key",
    "fetch_neo_feed",
    "load_neo_file",
    "get_neo_feed",
]


def get_api_key(env_file=".env"):
    """Get the NeoWs API key from the environment.

    Parameters
    ----------
    env_file : path-like, optional
        A dotenv file loaded first (existing environment variables are not
        overridden). Ignored if it does not exist. Default is ``".env"``.

    Returns
    -------
    api_key : str
        Value of ``API_KEY`` or, if unset, ``NASA_API_KEY``. Empty string if
        neither is set.
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file, override=False)
    return os.environ.get(API_KEY_ENVVAR) or os.environ.get(API_KEY_ENVVAR_ALT, "")


@lru_cache()
def _query_cached(base_url, params_tuple, timeout):
    """Query with caching. Failed requests raise and are therefore not cached."""
    res = requests.get(base_url, params=dict(params_tuple), timeout=timeout)
    res.raise_for_status()
    return res.text


def _is_client_error(exc):
    """`True` for a 4xx `HTTPError`, which is not worth retrying."""
    res = getattr(exc, "response", None)
    return (
        isinstance(exc, requests.HTTPError)
        and res is not None
        and 400 <= res.status_code < 500
    )


def fetch_neo_feed(date, api_key, timeout=REQUEST_TIMEOUT, retries=RETRIES):
    """Fetch the NeoWs feed of a single date.

    Parameters
    ----------
    date : str
        The date, ``"YYYY-MM-DD"``. Used as both start and end date of the
        feed query.

    api_key : str
        The api.nasa.gov API key.

    timeout : float, optional
        Timeout of each HTTP request in seconds.

    retries : int, optional
        Number of attempts. Between attempts, sleeps
        ``BACKOFF_FACTOR * attempt`` seconds. Only connection errors, timeouts
        and 5xx responses are retried; a 4xx response fails at once.

    Returns
    -------
    text : str
        The raw JSON response text, or ``""`` if all attempts failed.
    """
    date = normalize_date(date)
    params = {"start_date": date, "end_date": date, "api_key": api_key}
    params_tuple = tuple(sorted(params.items()))

    for attempt in range(1, retries + 1):
        try:
            text = _query_cached(NEOWS_FEED_URL, params_tuple, timeout)
            logger.info("Fetched NeoWs feed for %s", date)
            return text
        except requests.RequestException as e:
            logger.warning(
                "NeoWs request for %s failed (attempt %d/%d): %s", date, attempt, retries, e
            )
            if _is_client_error(e):
                # bad API key, bad date etc.: the same request fails again
                break
            if attempt < retries:
                time.sleep(BACKOFF_FACTOR * attempt)
    return ""


def load_neo_file(path=DEFAULT_FALLBACK_FILE):
    """Load a previously saved NeoWs feed from a JSON file.

    Parameters
    ----------
    path : path-like, optional
        The JSON file. Default is ``"data.json"``.

    Returns
    -------
    feed : dict

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    ValueError
        If the file is not valid JSON.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"NEO data file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            feed = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse NEO data file {path}: {e}") from e
    logger.info("Loaded NEO data from %s", path)
    return feed


def get_neo_feed(date, api_key, fallback=DEFAULT_FALLBACK_FILE, **kwargs):
    """Fetch the NeoWs feed of `date`, falling back to a local file.

    Parameters
    ----------
    date : str
        The date, ``"YYYY-MM-DD"``.

    api_key : str
        The api.nasa.gov API key.

    fallback : path-like, optional
        JSON file loaded with `load_neo_file` when the API cannot be reached.
        If `None`, no fallback is attempted.

    **kwargs
        Passed to `fetch_neo_feed`.

    Returns
    -------
    feed : dict
        The parsed feed.

    Raises
    ------
    RuntimeError
        If fetching failed and `fallback` is `None`.
    ValueError
        If the fetched text is not valid JSON.
    """
    text = fetch_neo_feed(date, api_key, **kwargs)
    if text:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing NeoWs response: {e}") from e

    if fallback is None:
        raise RuntimeError(f"Failed to fetch NeoWs data for {date}.")
    logger.warning("Failed to fetch NeoWs data for %s. Loading data from %s", date, fallback)
    return load_neo_file(fallback)
