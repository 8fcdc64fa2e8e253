import sys

from src.counting.main import main

sys.exit(main())
