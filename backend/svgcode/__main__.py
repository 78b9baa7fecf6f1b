import sys

from svgcode.cli import main

sys.exit(main())
