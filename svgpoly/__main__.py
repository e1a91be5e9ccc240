import sys

from svgpoly.main import main

sys.exit(main())
