"""Entry point: python -m jrni [n|id|t]"""

from __future__ import annotations

from jrni.cli import main

if __name__ == "__main__":
    main(prog_name="jrni")
