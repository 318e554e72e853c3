#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from screenfeed.data import (
    BlockHeartbeat,
    FormatVariant,
    FrameDecoder,
    Heartbeat,
    PairBatch,
    PairFeed,
)
from screenfeed.data.config import DEFAULT_WS_URL

VARIANTS = {"run": FormatVariant.RUN, "counted": FormatVariant.COUNTED}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream decoded pair snapshots from the screener feed")
    p.add_argument("url", nargs="?", default=DEFAULT_WS_URL)
    p.add_argument("--variant", default="run", choices=sorted(VARIANTS))
    p.add_argument("--show", type=int, default=5, help="pairs to print per batch")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


def print_message(message, show: int) -> None:
    match message:
        case BlockHeartbeat():
            print(
                f"block | version={message.version} endpoint={message.endpoint} "
                f"latest={message.latest_block} hash={message.hash_hex}"
            )
        case PairBatch():
            print(f"pairs | version={message.version} count={len(message)}")
            for i, pair in enumerate(message.pairs[:show]):
                print(
                    f"  {i}: {pair.address_hex} | {pair.token_name} ({pair.token_symbol}/"
                    f"{pair.base_token_symbol}) price={pair.price:f} volume={pair.volume:f}"
                )
        case Heartbeat():
            print(f"ping  | {message.content}")


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    feed = PairFeed(args.url, decoder=FrameDecoder(VARIANTS[args.variant]))
    async for message in feed.stream():
        print_message(message, args.show)


if __name__ == "__main__":
    asyncio.run(main())
