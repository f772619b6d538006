import sys

from decayviz.app import main

sys.exit(main())
