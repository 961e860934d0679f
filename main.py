import sys

from bytesplit.cli import main

try:
    sys.exit(main())
except KeyboardInterrupt:
    pass
