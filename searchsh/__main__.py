import sys

from searchsh.main import main

sys.exit(main())
