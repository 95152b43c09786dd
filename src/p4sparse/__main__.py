import sys

from p4sparse.cli import main

sys.exit(main())
