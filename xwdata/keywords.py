"""
Vendor text to X-Wing data text normalization
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .utils import load_resource_json

LOGGER = logging.getLogger(__name__)


class Keywords:
    """
    Keyword substitution table for free text, plus exact-match
    corrections for short tokens such as stat and action names
    """

    replacements: List[Tuple[str, str]]
    exact_matches: Dict[str, str]

    def __init__(
        self,
        replacements: Optional[Sequence[Sequence[str]]] = None,
        exact_matches: Optional[Dict[str, str]] = None,
    ) -> None:
        if replacements is None or exact_matches is None:
            table: Dict[str, Any] = load_resource_json("keywords.json")
            if replacements is None:
                replacements = table.get("replace", [])
            if exact_matches is None:
                exact_matches = table.get("exact", {})

        self.replacements = [(str(old), str(new)) for old, new in replacements]
        self.exact_matches = dict(exact_matches)
        LOGGER.debug(
            f"Loaded {len(self.replacements)} replacements "
            f"and {len(self.exact_matches)} exact matches"
        )

    @classmethod
    def identity(cls) -> "Keywords":
        """
        Normalizer that leaves every string untouched
        """
        return cls(replacements=[], exact_matches={})

    def replace(self, text: Optional[str]) -> str:
        """
        Apply every substitution, in table order
        :param text: Free text from the vendor
        :return: Normalized text
        """
        text = text or ""
        for old, new in self.replacements:
            text = text.replace(old, new)
        return text

    def fix_exact_match(self, token: str) -> str:
        """
        Correct a whole token, leaving unknown tokens alone
        :param token: Short token (stat or action name)
        :return: Corrected token
        """
        return self.exact_matches.get(token, token)
