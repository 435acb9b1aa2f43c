"""Allow ``python -m yamlmatrix``."""

import sys

from yamlmatrix.cli import main

sys.exit(main())
