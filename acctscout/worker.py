# acctscout/worker.py
import argparse
import asyncio
import csv
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional, TypedDict

from .config import settings
from .utils.parser import CandidateFileError, load_candidates
from .verifier import is_valid_account_identifier

LOG = logging.getLogger(f"{settings.APP_NAME}-worker")

VALID = "valid"
INVALID = "invalid"


class CheckResult(TypedDict):
    identifier: str
    status: str


class BatchSummary(TypedDict):
    total: int
    valid: int
    invalid: int


def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


async def check_identifier(identifier: str, semaphore: asyncio.Semaphore) -> CheckResult:
    async with semaphore:
        try:
            loop = asyncio.get_running_loop()
            ok = await loop.run_in_executor(None, is_valid_account_identifier, identifier)
        except Exception:
            LOG.exception("Error checking identifier: %r", identifier)
            ok = False
    return {"identifier": identifier, "status": VALID if ok else INVALID}


# -------------------------------------------------------------------
# Chunk processing with progress visibility
# -------------------------------------------------------------------
async def process_chunk(identifiers: List[str], semaphore: Optional[asyncio.Semaphore] = None) -> List[CheckResult]:
    if not identifiers:
        return []
    if semaphore is None:
        semaphore = asyncio.Semaphore(settings.WORKER_CONCURRENCY)

    chunk_start = datetime.now(timezone.utc)
    LOG.info("Chunk START size=%d time=%s", len(identifiers), chunk_start)

    tasks = [asyncio.create_task(check_identifier(i, semaphore)) for i in identifiers]
    step = max(1, settings.PROGRESS_STEP)
    processed = 0
    for coro in asyncio.as_completed(tasks):
        await coro
        processed += 1
        if processed % step == 0 or processed == len(identifiers):
            LOG.info("Chunk progress processed=%d/%d", processed, len(identifiers))

    # as_completed yields in finish order; report in input order
    results = [t.result() for t in tasks]

    chunk_end = datetime.now(timezone.utc)
    LOG.info(
        "Chunk END size=%d time=%s duration=%.2fs",
        len(identifiers),
        chunk_end,
        (chunk_end - chunk_start).total_seconds(),
    )
    return results


async def check_identifiers(identifiers: List[str], chunk_size: Optional[int] = None) -> List[CheckResult]:
    size = max(1, chunk_size or settings.CHUNK_SIZE)
    semaphore = asyncio.Semaphore(settings.WORKER_CONCURRENCY)
    results: List[CheckResult] = []
    for start in range(0, len(identifiers), size):
        results.extend(await process_chunk(identifiers[start:start + size], semaphore))
    return results


def summarize(results: List[CheckResult]) -> BatchSummary:
    valid = sum(1 for r in results if r["status"] == VALID)
    return {"total": len(results), "valid": valid, "invalid": len(results) - valid}


def write_results(results: List[CheckResult], out, only_invalid: bool = False):
    writer = csv.writer(out)
    writer.writerow(["identifier", "status"])
    for r in results:
        if only_invalid and r["status"] == VALID:
            continue
        writer.writerow([r["identifier"], r["status"]])


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{settings.APP_NAME}-worker",
        description="Check a file of federated account identifiers.",
    )
    parser.add_argument("input", help="candidate file (.csv, .xlsx or one identifier per line)")
    parser.add_argument("-o", "--output", help="write CSV results here instead of stdout")
    parser.add_argument("--only-invalid", action="store_true", help="only report invalid identifiers")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging()
    LOG.info("Starting %s worker", settings.APP_NAME)

    try:
        identifiers = load_candidates(args.input)
    except CandidateFileError as e:
        LOG.error("Cannot read candidates: %s", e)
        return 2

    results = asyncio.run(check_identifiers(identifiers))
    summary = summarize(results)

    if args.output:
        try:
            with open(args.output, "w", newline="", encoding="utf-8") as out:
                write_results(results, out, only_invalid=args.only_invalid)
        except OSError as e:
            LOG.error("Cannot write results to %s: %s", args.output, e)
            return 2
    else:
        write_results(results, sys.stdout, only_invalid=args.only_invalid)

    LOG.info("Done total=%d valid=%d invalid=%d", summary["total"], summary["valid"], summary["invalid"])
    return 1 if summary["invalid"] else 0


if __name__ == "__main__":
    sys.exit(main())
