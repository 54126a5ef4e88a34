"""Entry point kept minimal by delegating to Engine.

The engine builds the window, loads assets, registers the start / game /
gameover scenes and runs the loop until the window is closed or Escape is
pressed.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
