# SPDX-License-Identifier: MIT

from habitgrid.cleanup import register_cleanup
from habitgrid.initialize import initialize
from habitgrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
