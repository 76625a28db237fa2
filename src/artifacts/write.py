from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.models import load_processed_api_data
from artifacts.classify import classify_and_filter
from artifacts.collect import collect_symbols
from artifacts.models.artifacts.release_symbols import RunSummary
from artifacts.utils import _dump_json
from overrides.features import FeatureQueryAll
from overrides.tags import RenderOverride
from render.context import RenderContext
from rules.config import SymbolsConfig

if TYPE_CHECKING:
    from api.models import ProcessedAPIData
    from artifacts.models.artifacts.release_symbols import ReleaseSymbolRecord

logger = logging.getLogger(__name__)


def render_release_symbols(
    data: ProcessedAPIData,
    *,
    config: SymbolsConfig | None = None,
) -> tuple[dict[str, ReleaseSymbolRecord], RunSummary]:
    """Render the stable symbol table for one processed API payload.

    Args:
        data: Parsed processed API data
        config: Optional configuration for channel handling

    Returns:
        The symbol table keyed by ascending symbol id, and the run summary.
    """
    if config is None:
        config = SymbolsConfig()

    feature_query = FeatureQueryAll(data.feature)
    override = RenderOverride(data.api, feature_query)
    context = RenderContext()

    table = collect_symbols(context.iter_symbols(data.api))
    logger.debug("%s: collected %d symbols", context.name, len(table))

    result = classify_and_filter(
        table,
        override,
        channel_tag=config.channel_tag,
        strict_channel=config.strict_channel,
    )

    # Code point order, which matches UTF-8 byte order.
    symbols = {
        symbol_id: result.symbols[symbol_id] for symbol_id in sorted(result.symbols)
    }

    summary = RunSummary(
        stable_count=len(symbols),
        deprecated_count=result.deprecated_count,
        skip_count=result.skip_count,
        definitions_revision=data.definitions_revision,
    )
    return symbols, summary


def generate_release_symbols(
    raw: bytes | str,
    *,
    config: SymbolsConfig | None = None,
) -> bytes:
    """Parse a raw payload and return the serialized stable symbol table.

    The summary line is logged only once everything has succeeded.
    """
    data = load_processed_api_data(raw)
    symbols, summary = render_release_symbols(data, config=config)

    logger.warning(
        "Found %d stable symbols (%d deprecated, %d skipped) at %s",
        summary.stable_count,
        summary.deprecated_count,
        summary.skip_count,
        summary.definitions_revision,
    )
    return _dump_json(symbols)
