import sys

from ztui.main import main

sys.exit(main())
