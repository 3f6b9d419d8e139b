"""Simple momentum signal example over a simulated candle feed."""
import asyncio
import logging
import random

from streamta import MACD, RSI, SMA, Candle, configure_logging

log = logging.getLogger(__name__)


async def candle_feed(count: int = 200, seed: int = 1):
    """Random-walk candles, one per tick of the event loop."""
    rng = random.Random(seed)
    price = 1.2500
    for i in range(count):
        open_ = price
        price += rng.gauss(0.0, 0.0008)
        yield Candle(
            timestamp=f"2025-01-01T{i // 60:02d}:{i % 60:02d}:00Z",
            open=open_,
            high=max(open_, price) + abs(rng.gauss(0.0, 0.0003)),
            low=min(open_, price) - abs(rng.gauss(0.0, 0.0003)),
            close=price,
            volume=float(rng.randint(10, 500)),
        )
        await asyncio.sleep(0)


async def main() -> None:
    # Smoothed RSI alongside MACD, both fed the candle close
    momentum = RSI(14).pullback(SMA(3)).together(MACD(12, 26, 9)).mature(35)

    async for value in momentum.iter_over_stream(candle_feed(), records=True):
        if value is None:
            continue

        rsi, macd = value
        if rsi > 0.7 and macd.histogram > 0:
            log.info("momentum UP: rsi=%.3f hist=%.6f", rsi, macd.histogram)
        elif rsi < 0.3 and macd.histogram < 0:
            log.info("momentum DOWN: rsi=%.3f hist=%.6f", rsi, macd.histogram)


if __name__ == "__main__":
    configure_logging("INFO")
    asyncio.run(main())
