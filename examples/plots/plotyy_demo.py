from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from plotbox import Session


def main() -> None:
    parser = argparse.ArgumentParser(description="Two Y rulers sharing one X ruler.")
    parser.add_argument("--out", type=Path, default=Path("plotyy.png"))
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    x = 0.1 * np.arange(20, dtype=np.float64)
    session = Session(width=args.width, height=args.height)
    session.plotyy(x, np.sin(x), x, 0.7 * np.cos(x))
    session.xlabel("time")
    session.ylabel("primary", 1)
    session.ylabel("secondary", 2)

    frame = session.gcf().to_rgba()
    Image.fromarray(frame).save(args.out)
    logging.getLogger(__name__).info("wrote %s", args.out)


if __name__ == "__main__":
    main()
