# SPDX-License-Identifier: MIT

from gridcal.cleanup import register_cleanup
from gridcal.initialize import initialize
from gridcal.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
