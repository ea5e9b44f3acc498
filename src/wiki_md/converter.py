"""Conversion driver for wiki-md.

Runs every collected page through read -> classify -> render -> write. Each
page is an independent task executed in a fixed-size process pool; a failing
task is reported as a failed ConversionResult and never stops its siblings.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path

from .config import settings
from .errors import InputReadError, OutputWriteError, WikiMdError
from .models import BatchSummary, ConversionResult, ConversionStatus, ConversionTask
from .utils.content_classifier import classify
from .utils.markdown_emitter import render_document, write_markdown

logger = logging.getLogger(__name__)


def init_worker_logging(level: int, log_format: str) -> None:
    """Pool initializer: spawned workers start without logging handlers."""
    logging.basicConfig(level=level, format=log_format, force=True)


def read_page(input_path: Path) -> str:
    """Read an input page as UTF-8 text."""
    try:
        with open(input_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(input_path, str(e)) from e


def failed_result(task: ConversionTask, error: str) -> ConversionResult:
    return ConversionResult(input_path=task.input_path, status=ConversionStatus.FAILED, error=error)


def convert_file(task: ConversionTask) -> ConversionResult:
    """Convert one page and report the outcome.

    Args:
        task: Input page and output folder

    Returns:
        ConversionResult; errors are captured, not raised
    """
    if task.is_skipped:
        logger.debug("Skipping %s", task.input_path)
        return ConversionResult(input_path=task.input_path, status=ConversionStatus.SKIPPED)

    try:
        html_content = read_page(task.input_path)
        document = classify(html_content)
        markdown = render_document(document, task.input_path, task.output_path)
        write_markdown(markdown, task.output_path)
    except WikiMdError as e:
        logger.error("Failed to convert %s: %s", task.input_path, e)
        return failed_result(task, str(e))
    except Exception as e:
        # Unexpected errors still end only this task
        logger.exception("Unexpected error converting %s", task.input_path)
        return failed_result(task, f"{type(e).__name__}: {e}")

    logger.debug("Converted %s -> %s (%d blocks)", task.input_path, task.output_path, len(document.blocks))
    return ConversionResult(
        input_path=task.input_path,
        output_path=task.output_path,
        status=ConversionStatus.CONVERTED,
    )


def split_clashing_tasks(tasks: list[ConversionTask]) -> tuple[list[ConversionTask], list[ConversionResult]]:
    """Keep the first task per output file; later ones fail with the clash.

    Tasks must already be sorted so the winner is deterministic. Skipped
    tasks write nothing and never clash.
    """
    claimed: dict[Path, Path] = {}
    runnable = []
    clashes = []
    for task in tasks:
        if task.is_skipped:
            runnable.append(task)
            continue
        owner = claimed.setdefault(task.output_path, task.input_path)
        if owner == task.input_path:
            runnable.append(task)
            continue
        logger.error("%s and %s both map to %s", owner, task.input_path, task.output_path)
        clashes.append(failed_result(task, f"Output {task.output_path} already produced from {owner}"))
    return runnable, clashes


def convert_all(input_files: Iterable[Path], output_folder: Path, max_workers: int = 1) -> BatchSummary:
    """Convert every input file into ``output_folder``.

    Args:
        input_files: Pages to convert
        output_folder: Flat destination folder, created if missing
        max_workers: Pool size; 1 converts sequentially in this process

    Returns:
        BatchSummary with one result per input file, sorted by input path
    """
    try:
        output_folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(output_folder, str(e)) from e

    tasks = sorted(
        (ConversionTask(input_path=path, output_folder=output_folder) for path in input_files),
        key=lambda task: str(task.input_path),
    )
    tasks, results = split_clashing_tasks(tasks)
    logger.info("Converting %d file(s) with %d worker(s)", len(tasks), max_workers)

    if max_workers == 1 or len(tasks) <= 1:
        results.extend(convert_file(task) for task in tasks)
    else:
        with ProcessPoolExecutor(
            max_workers=max_workers,
            initializer=init_worker_logging,
            initargs=(logging.getLogger().getEffectiveLevel(), settings.log_format),
        ) as executor:
            futures = {executor.submit(convert_file, task): task for task in tasks}
            for future in as_completed(futures):
                task = futures[future]
                try:
                    results.append(future.result())
                except Exception as e:
                    # Worker process died before returning a result
                    logger.error("Worker failed on %s: %s", task.input_path, e)
                    results.append(failed_result(task, str(e)))

    results.sort(key=lambda result: str(result.input_path))
    return BatchSummary(results=results)
