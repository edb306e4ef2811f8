"""Module entrypoint.

Allows:
    python -m stenographer path/to/log.json
"""

from __future__ import annotations

from stenographer.cli import main

if __name__ == "__main__":
    main()
