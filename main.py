#!/usr/bin/env python
"""Compute open tax lots from a stream of buy/sell transactions.

Reads ``DATE,SIDE,PRICE,QUANTITY`` lines from stdin, applies them in order
and, at end of input, prints every remaining lot as
``ID,DATE,PRICE,QUANTITY`` (front of the selection order first).

Usage:
    taxlot fifo < transactions.csv
    taxlot hifo < transactions.csv
"""

import argparse
import logging
import sys
from typing import Iterable, TextIO

from exceptions import StdinReadError, TaxLotError
from logging_config import setup_logging
from models import SelectionPolicy
from schemas.transaction import TransactionRecord
from services.lot_collection_service import LotCollection
from utils.formatting import format_lot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taxlot",
        description="Compute open tax lots from buy/sell transactions on stdin",
    )
    subparsers = parser.add_subparsers(dest="policy", metavar="{fifo,hifo}", required=True)
    subparsers.add_parser("fifo", help="Sell the oldest lot first")
    subparsers.add_parser("hifo", help="Sell the highest-priced lot first")
    return parser


def _read_lines(stream: TextIO) -> Iterable[str]:
    try:
        for line in stream:
            yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise StdinReadError(e) from e


def run(policy: SelectionPolicy, stream: TextIO) -> list[str]:
    """Apply every line of ``stream`` and return the formatted open lots.

    Processing stops at the first bad line; the collection is never
    reported partially.

    Raises:
        TaxLotError: A line failed to parse or an arithmetic step failed.
    """
    collection = LotCollection(policy)
    for line_number, line in enumerate(_read_lines(stream), start=1):
        record = TransactionRecord.from_line(line)
        logger.debug("Line %s: %s %s @ %s on %s", line_number, record.side.value, record.quantity, record.price, record.date)
        collection.apply(record)

    logger.info("Processed input; %s open lot(s)", len(collection))
    return [format_lot(lot) for lot in collection.drain()]


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging()

    policy = SelectionPolicy.from_name(args.policy)
    try:
        report = run(policy, sys.stdin)
    except TaxLotError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    for row in report:
        print(row)


if __name__ == "__main__":
    main()
