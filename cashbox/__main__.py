"""Run the cashbox demo with ``python -m cashbox``"""

import sys

from .demo import main

sys.exit(main())
