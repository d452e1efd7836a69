import sys

from src.iss_flyover.cli import main

sys.exit(main())
