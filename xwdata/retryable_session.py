"""
Retryable Session to download content
"""
import datetime
import functools
from typing import Union

import requests
import requests.adapters
import requests_cache
import urllib3

from . import constants
from .xwdata_config import XwdataConfig


def retryable_session(
    cache_name: str = "default",
    retries: int = 8,
) -> Union[requests.Session, requests_cache.CachedSession]:
    """
    Session with requests to allow for re-attempts at downloading missing data
    :param cache_name: Cache file to use when caching is turned on
    :param retries: How many retries to attempt
    :return: Session that does the downloading
    """
    session: Union[requests.Session, requests_cache.CachedSession]

    if XwdataConfig().use_cache:
        session = requests_cache.CachedSession(
            cache_name=str(constants.CACHE_PATH.joinpath(cache_name)),
            expire_after=datetime.timedelta(days=1),
            stale_if_error=True,
        )
    else:
        session = requests.Session()

    retry = urllib3.util.retry.Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=0.3,
        status_forcelist=(500, 502, 504),
    )

    adapter = requests.adapters.HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.request = functools.partial(session.request, timeout=30)  # type: ignore

    session.headers.update({"User-Agent": "xwdata"})
    return session
