"""
XWDATA Main Executor
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

from xwdata.utils import init_logger

if TYPE_CHECKING:
    from xwdata.context import PipelineContext

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def build_ships(
    app_metadata: Dict[str, List[Dict[str, Any]]], cards: List[Dict[str, Any]]
) -> PipelineContext:
    """
    Turn the vendor documents into ships, one card at a time
    :param app_metadata: Vendor app-metadata
    :param cards: Vendor cards
    :return: Context holding the built ships
    """
    from xwdata.context import PipelineContext
    from xwdata.ship_builder import process_card

    context = PipelineContext.from_app_metadata(app_metadata)
    for card in cards:
        process_card(context, card)

    LOGGER.info(f"Built {len(context.ships)} ships from {len(cards)} cards")
    return context


def dispatcher() -> None:
    """
    XWDATA Dispatcher
    """
    from xwdata.output_generator import persist_ships
    from xwdata.providers import FfgSquadBuilderProvider

    provider = FfgSquadBuilderProvider()
    app_metadata = provider.get_app_metadata()
    cards = provider.get_cards()

    context = build_ships(app_metadata, cards)
    persist_ships(context.ships)


def main() -> None:
    """
    XWDATA safe main call
    """
    try:
        dispatcher()
    except Exception:
        LOGGER.exception("XWDATA run failed")
        raise


if __name__ == "__main__":
    main()
