"""Module entrypoint for ``python -m sizetree``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and scan setup happen in ``sizetree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
