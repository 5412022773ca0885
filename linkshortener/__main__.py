import sys

from linkshortener.server import main


sys.exit(main())
