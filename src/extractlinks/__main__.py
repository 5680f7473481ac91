import sys

from extractlinks.run_system import main

sys.exit(main())
