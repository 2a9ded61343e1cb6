import sys

from keywordhighlighter.cli.main import main

sys.exit(main())
