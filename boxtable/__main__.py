#!/usr/bin/env python3
# boxtable/__main__.py
from __future__ import annotations

from boxtable.interface.app import main

if __name__ == "__main__":
    main()
