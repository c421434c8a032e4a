import sys

from docsearch.cli import main

sys.exit(main())
