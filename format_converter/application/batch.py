"""Line-oriented batch conversion.

Each non-blank line is converted on its own. A failing line is rendered
inline with the configured error marker and never aborts its siblings.
"""
import asyncio
import concurrent.futures as cf
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..domain.converter import ConversionResult
from ..domain.errors import ConversionError, id_text
from .service import ConversionService, FormatKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    """Converted lines in input order."""
    lines: List[str]
    failures: int = 0

    @property
    def ok(self) -> bool:
        return self.failures == 0

    def joined(self) -> str:
        return "\n".join(self.lines)


def _is_async(service: ConversionService, from_id: FormatKey, to_id: FormatKey) -> bool:
    try:
        return service.lookup_converter(from_id, to_id).is_async
    except ConversionError:
        return False


def convert_batch(
    service: ConversionService,
    from_id: FormatKey,
    to_id: FormatKey,
    text: str,
    max_workers: Optional[int] = None,
) -> BatchResult:
    """
    Convert every line of ``text`` independently.

    Args:
        service: Conversion service to run each line through
        from_id: Source format id
        to_id: Target format id
        text: Newline separated input
        max_workers: Thread count; defaults to ``service.config.batch.max_workers``

    Returns:
        BatchResult with one output line per input line
    """
    workers = max_workers or service.config.batch.max_workers
    marker = service.config.batch.error_marker
    is_async = _is_async(service, from_id, to_id)

    def convert_line(line: str) -> ConversionResult:
        if is_async:
            return asyncio.run(service.aconvert(from_id, to_id, line))
        return service.convert(from_id, to_id, line)

    source_lines = text.splitlines()
    pending = {index: line for index, line in enumerate(source_lines) if line.strip()}
    results: Dict[int, ConversionResult] = {}
    if workers <= 1:
        results = {index: convert_line(line) for index, line in pending.items()}
    else:
        with cf.ThreadPoolExecutor(max_workers=workers) as executor:
            future_map = {executor.submit(convert_line, line): index for index, line in pending.items()}
            for fut in cf.as_completed(future_map):
                results[future_map[fut]] = fut.result()

    lines: List[str] = []
    failures = 0
    for index, line in enumerate(source_lines):
        result = results.get(index)
        if result is None:
            lines.append("")
            continue
        if not result.ok:
            failures += 1
        lines.append(result.render(marker))

    if failures:
        logger.warning(
            "Batch %s -> %s: %d of %d lines failed",
            id_text(from_id),
            id_text(to_id),
            failures,
            len(pending),
        )
    return BatchResult(lines=lines, failures=failures)
