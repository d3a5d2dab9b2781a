import sys

from gameshell.main import main

sys.exit(main())
