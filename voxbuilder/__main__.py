import sys

from voxbuilder.main import main

sys.exit(main())
