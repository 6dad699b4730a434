import sys

from flapgate.main import main

sys.exit(main())
