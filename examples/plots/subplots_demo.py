from __future__ import annotations

import argparse
import logging
from pathlib import Path

from PIL import Image

from plotbox import Session


def main() -> None:
    parser = argparse.ArgumentParser(description="2x2 subplot grid with held series.")
    parser.add_argument("--out", type=Path, default=Path("subplots.png"))
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    x = [0.1, 0.2, 0.8]
    y = [7.0, 3.0, 1.0]
    y2 = [12.0, 8.0, -3.0]

    session = Session(width=args.width, height=args.height)
    session.subplot(2, 2, 1)
    session.plot(y, x)
    session.xlabel("x label 1")
    session.ylabel("y label 1")
    session.hold("on")
    session.plot(y2, x)
    session.axis(0.0, 1.0, -5.0, 15.0)

    for number in (2, 3):
        session.subplot(2, 2, number)
        session.xlabel(f"x label {number}")
        session.ylabel(f"y label {number}")

    session.subplot(2, 2, 4)
    session.plot(y2, x)
    session.xlabel("x label 4")
    session.ylabel("y label 4")

    frame = session.gcf().to_rgba()
    Image.fromarray(frame).save(args.out)
    logging.getLogger(__name__).info("wrote %s", args.out)


if __name__ == "__main__":
    main()
