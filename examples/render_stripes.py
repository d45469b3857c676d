"""Render stripe images and save them as PNG files.

Run with:
    python examples/render_stripes.py [width] [height] [seed]
"""
import sys

from pixator import StripeMode, render


def save_stripes(width: int, height: int, seed: int) -> None:
    # Same seed, two palette styles.
    for mode in StripeMode:
        buffer = render(width, height, seed=seed, mode=mode)
        path = f"stripes_{mode.value}_{width}x{height}_{seed}.png"
        buffer.to_image().save(path, format="PNG")
        print(f"Saved {path}")


def demonstrate_determinism(width: int, height: int, seed: int) -> None:
    first = render(width, height, seed=seed)
    again = render(width, height, seed=seed)
    other = render(width, height, seed=seed + 1)
    print("Same seed, same pixels:", first == again)
    print("Next seed, same pixels:", first == other)


if __name__ == "__main__":
    args = [int(a) for a in sys.argv[1:4]]
    width, height, seed = args + [700, 100, 42][len(args):]
    save_stripes(width, height, seed)
    demonstrate_determinism(width, height, seed)
