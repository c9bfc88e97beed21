"""Allow ``python -m streak_sampler``."""

import sys

from streak_sampler.cli import main

sys.exit(main())
