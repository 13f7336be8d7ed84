from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from plotbox import Figure, PointerNavigator, Series


def main() -> None:
    """Feed a referenced buffer, then replay a wheel zoom and a right-drag pan."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--out-dir", type=Path, default=Path("."))
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    log = logging.getLogger(__name__)

    fig = Figure(width=640, height=400)
    box = fig.add_box()
    x = np.linspace(0.0, 10.0, 200)
    y = np.full_like(x, np.nan)
    box.add_series(Series.referenced(x, y))

    for step in range(1, 5):
        y[: step * 50] = np.sin(x[: step * 50])
        box.autoscale()
        path = args.out_dir / f"live_{step}.png"
        Image.fromarray(fig.to_rgba()).save(path)
        log.info("wrote %s", path)

    nav = PointerNavigator(fig)
    nav.wheel(-1, 320, 200)
    nav.press("right", 320, 200)
    nav.drag(380, 200)
    nav.release("right", 380, 200)
    path = args.out_dir / "live_navigated.png"
    Image.fromarray(fig.to_rgba()).save(path)
    log.info("wrote %s with x limits %r", path, box.x_ruler.limits)


if __name__ == "__main__":
    main()
