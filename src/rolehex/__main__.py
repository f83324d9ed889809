"""Entry point for 'python -m rolehex' command.

This module allows the RoleHex CLI to be invoked using
'python -m rolehex'.
"""

from rolehex.cli import main

if __name__ == "__main__":
    main()
