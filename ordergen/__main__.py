import sys

from ordergen.main import main

sys.exit(main())
