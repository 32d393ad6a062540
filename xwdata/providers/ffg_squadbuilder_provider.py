"""
FFG Squad Builder 3rd party provider
"""
import logging
from typing import Any, Dict, List, Optional, Union

from ..xwdata_config import XwdataConfig
from .abstract_provider import AbstractProvider

LOGGER = logging.getLogger(__name__)


class FfgSquadBuilderProvider(AbstractProvider):
    """
    FFG Squad Builder API provider
    """

    api_root: str

    def __init__(self, api_root: Optional[str] = None) -> None:
        super().__init__(self._build_http_header())
        self.api_root = (api_root or XwdataConfig().api_root).rstrip("/")

    def _build_http_header(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> Any:
        """
        Download content from the Squad Builder
        Api calls always return JSON from them
        :param url: URL to download from
        :param params: Options for URL download
        """
        response = self.session.get(url, params=params)
        response.raise_for_status()
        self.log_download(response)
        return response.json()

    def get_endpoint(self, endpoint: str) -> Any:
        """
        Download an endpoint relative to the API root
        :param endpoint: Endpoint path, i.e. "/cards/"
        :return: Decoded response
        """
        LOGGER.info(f"Fetching {endpoint}")
        return self.download(f"{self.api_root}{endpoint}")

    def get_app_metadata(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Lookup tables (ship types, factions, stats, ...) keyed by section
        :return: App metadata document
        """
        app_metadata: Dict[str, List[Dict[str, Any]]] = self.get_endpoint(
            "/app-metadata/"
        )
        return app_metadata

    def get_cards(self) -> List[Dict[str, Any]]:
        """
        Every card the Squad Builder knows about
        :return: Raw cards
        """
        cards: List[Dict[str, Any]] = self.get_endpoint("/cards/")["cards"]
        LOGGER.info(f"Received {len(cards)} cards")
        return cards
