from __future__ import annotations

import logging

from lazily import Lazy, LazyConfig, Trace, lift2


def load_prices() -> list[float]:
    print("loading prices...")
    return [19.5, 4.25, 7.0]


def load_tax_rate() -> float:
    print("loading tax rate...")
    return 0.2


def build_report(trace: Trace) -> Lazy[str]:
    prices = Lazy.defer(load_prices, LazyConfig(name="prices", trace=trace))
    rate = Lazy.defer(load_tax_rate, LazyConfig(name="rate", trace=trace))

    subtotal = prices.map(sum)
    total = lift2(lambda s, r: s * (1 + r), subtotal, rate)
    return total.map(lambda t: f"Total (incl. tax): {t:.2f}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    trace = Trace()
    report = build_report(trace)
    print(repr(report))  # nothing loaded yet
    print(report)
    print(report)  # cached, loaders do not run again

    for event in trace.get_events():
        print(event.id, event.parent_id, event.action, event.info.get("name"))
