import sys

from rcomp.rcomp import main

sys.exit(main())
