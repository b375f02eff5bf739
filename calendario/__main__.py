import sys

from calendario.app import main

sys.exit(main())
