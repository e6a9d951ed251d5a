from __future__ import annotations

import sys

from dirtree.main import main

sys.exit(main())
