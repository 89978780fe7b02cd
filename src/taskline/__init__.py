# SPDX-License-Identifier: MIT

from taskline.cleanup import register_cleanup
from taskline.initialize import initialize
from taskline.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
