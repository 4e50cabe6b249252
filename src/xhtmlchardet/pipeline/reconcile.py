"""Stage 4: merge the stage signals and the caller's hint into a result."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from xhtmlchardet.enums import SignalSource
from xhtmlchardet.names import canonical_name, with_byte_order
from xhtmlchardet.pipeline import Signal
from xhtmlchardet.pipeline.bom import detect_bom, detect_layout
from xhtmlchardet.pipeline.meta import detect_meta_charset
from xhtmlchardet.pipeline.xmldecl import detect_xml_declaration

logger = logging.getLogger(__name__)


def reconcile(signals: Iterable[Signal | None], hint: str | None = None) -> list[str]:
    """Order *signals* and *hint* by trust and drop duplicate names.

    Signals rank BOM, then XML declaration, then HTML meta.  The hint comes
    last because transport metadata is the most likely to be wrong.  Names
    are compared in canonical form and only the first occurrence is kept.

    :param signals: Stage outputs; ``None`` entries are ignored.
    :param hint: Externally supplied charset label, already canonical or not.
    :returns: Canonical charset names, most trustworthy first.
    """
    ranked = sorted(
        (s for s in signals if s is not None), key=lambda s: s.source.value
    )
    if hint is not None:
        hinted = canonical_name(hint)
        if hinted is None:
            logger.debug("Ignoring unknown encoding hint %r", hint)
        else:
            ranked.append(Signal(source=SignalSource.HINT, charset=hinted))

    result: list[str] = []
    seen: set[str] = set()
    for signal in ranked:
        name = canonical_name(signal.charset) or signal.charset
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result


def run_pipeline(data: bytes, hint: str | None = None) -> list[str]:
    """Run every detection stage over *data* and reconcile the results.

    :param data: The sniffing window, read from the start of the document.
    :param hint: Optional externally declared charset.
    :returns: Canonical charset names, most trustworthy first; empty if
        nothing was found.
    """
    layout = detect_layout(data)
    signals = [
        detect_bom(data),
        detect_xml_declaration(data, layout),
        detect_meta_charset(data, layout),
    ]
    for signal in signals:
        if signal is not None:
            logger.debug("%s signal: %s", signal.source.name, signal.charset)
    if hint is not None:
        hinted = canonical_name(hint)
        if hinted is not None:
            hint = with_byte_order(hinted, layout.width, layout.order)
    result = reconcile(signals, hint)
    logger.debug("Detected charsets: %s", result)
    return result
